"""
Settings Manager - Quan ly load/save settings cua ung dung.

File: ~/.wordfreq/settings.json

API:
    settings = load_app_settings()  # -> AppSettings
    save_app_settings(settings)
"""

import json
import threading
from typing import Any

from config.paths import SETTINGS_FILE
from config.app_settings import AppSettings
from core.logging_config import log_warning

# Thread-safe lock de tranh race condition khi save settings
_settings_lock = threading.Lock()


def _load_app_settings_unlocked() -> AppSettings:
    """
    Load settings tu file KHONG co lock.

    Chi duoc goi tu ben trong code da acquire _settings_lock,
    hoac tu load_app_settings() (read-only, khong can lock).

    Returns:
        AppSettings instance voi values tu file + defaults
    """
    try:
        if SETTINGS_FILE.exists():
            content = SETTINGS_FILE.read_text(encoding="utf-8")
            saved = json.loads(content)
            if isinstance(saved, dict):
                return AppSettings.from_dict(saved)
            log_warning(f"[Settings] {SETTINGS_FILE} is not a JSON object, using defaults")
    except (OSError, json.JSONDecodeError) as e:
        log_warning(f"[Settings] Could not read {SETTINGS_FILE}: {e}")
    return AppSettings()


def _save_app_settings_unlocked(settings: AppSettings) -> bool:
    """
    Save AppSettings ra file KHONG co lock.

    Merge voi existing data de bao toan extra keys.

    Returns:
        True neu save thanh cong
    """
    try:
        existing_data: dict[str, Any] = {}
        try:
            if SETTINGS_FILE.exists():
                existing_data = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            pass
        if not isinstance(existing_data, dict):
            existing_data = {}

        updated = {**existing_data, **settings.to_dict()}
        SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
        SETTINGS_FILE.write_text(json.dumps(updated, indent=2), encoding="utf-8")
        return True
    except OSError:
        return False


def load_app_settings() -> AppSettings:
    """
    Load settings tu file va tra ve AppSettings typed instance.

    Neu file khong ton tai hoac loi, tra ve defaults.
    """
    return _load_app_settings_unlocked()


def save_app_settings(settings: AppSettings) -> bool:
    """
    Save AppSettings ra file (thread-safe).

    Returns:
        True neu save thanh cong
    """
    with _settings_lock:
        return _save_app_settings_unlocked(settings)

