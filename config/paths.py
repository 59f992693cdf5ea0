"""
Application Paths - Centralized path definitions cho wordfreq

Module nay dinh nghia tat ca cac duong dan su dung trong ung dung.
Tap trung o mot noi de tranh hardcode rai rac.

App data duoc luu tai: ~/.wordfreq/
- logs/         : Log files
- settings.json : Cau hinh loader/presenter
"""

import os
from pathlib import Path


# =============================================================================
# Ten ung dung - Single source of truth cho naming
# =============================================================================
APP_NAME = "wordfreq"

# =============================================================================
# Thu muc goc cua ung dung
# =============================================================================
APP_DIR = Path.home() / f".{APP_NAME}"

# =============================================================================
# Cac thu muc con
# =============================================================================
LOG_DIR = APP_DIR / "logs"

# =============================================================================
# Cac file cau hinh
# =============================================================================
SETTINGS_FILE = APP_DIR / "settings.json"

# =============================================================================
# Environment Variables - Ten bien moi truong cho debug mode
# =============================================================================
DEBUG_ENV_VAR = "WORDFREQ_DEBUG"

# Kiem tra debug mode tu environment variable
DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")

