# Config
"""
Configuration for the donor profile flattener.
Values can be overridden through environment variables or a .env file.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self) -> None:
        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE") or None
        self.dev_mode = _env_bool("DEV_MODE", False)

        # Batch files
        self.input_path = Path(os.getenv("DONOR_PROFILES_INPUT", "donorprofiles.json"))
        self.output_path = Path(os.getenv("DONOR_PROFILES_OUTPUT", "a2_profiles.json"))
        self.output_indent = 2

        # Fail the batch when a donor has no photos
        self.require_photo = _env_bool("DONOR_PROFILES_REQUIRE_PHOTO", False)

    def get_log_file_path(self) -> Optional[Path]:
        return Path(self.log_file) if self.log_file else None

# Singleton instance
_settings = None

def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

def reset_settings():
    global _settings
    _settings = None
