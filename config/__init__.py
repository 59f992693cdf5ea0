"""
Config Package - Chua cac constants va cau hinh cua ung dung

Bao gom:
- paths: Duong dan app data, log dir, debug flag
- app_settings: Typed settings cho loader/presenter
"""

from config.app_settings import AppSettings
from config.paths import APP_NAME, DEBUG_MODE, LOG_DIR, SETTINGS_FILE

__all__ = [
    "AppSettings",
    "APP_NAME",
    "DEBUG_MODE",
    "LOG_DIR",
    "SETTINGS_FILE",
]
