"""
Logging configuration for BPDX.

Where the log file lives on each platform, and the knobs that control
what gets written. Export runs process personal data, so masking is on
unless explicitly switched off.
"""

import os
import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from bpdx.constants import LOG_FILE_NAME, LOG_RETENTION_DAYS, SENSITIVE_KEYS


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["LogLevel"]:
        """Level for a case-insensitive name, or None if unrecognised"""
        if not value:
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None


@dataclass
class LogConfig:
    """Configuration class for BPDX logging"""

    log_filename: str = f"{LOG_FILE_NAME}.log"
    log_retention_days: int = LOG_RETENTION_DAYS

    default_level: LogLevel = LogLevel.INFO
    console_level: LogLevel = LogLevel.WARNING

    include_timestamps: bool = True
    include_thread_info: bool = False
    include_process_info: bool = False

    # One DEBUG record per exporter page on the "bpdx.export" logger
    log_export_pages: bool = True

    sanitize_sensitive_data: bool = True
    mask_email_addresses: bool = True
    sensitive_keys: tuple = SENSITIVE_KEYS

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "LogConfig":
        """
        Build a config from stored user settings.

        Args:
            settings: Settings mapping as stored by ConfigStore

        Returns:
            LogConfig: Defaults with the stored log level applied
        """
        config = cls()
        level = LogLevel.parse(settings.get("log_level"))
        if level:
            config.default_level = level
        return config


def _platform_log_root() -> Path:
    system = platform.system().lower()

    if system == "windows":
        base_dir = Path(os.environ.get("APPDATA", ""))
        if not base_dir.exists():
            base_dir = Path.home()
        return base_dir / LOG_FILE_NAME / "logs"

    if system == "darwin":
        return Path.home() / "Library" / "Logs" / LOG_FILE_NAME

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    base_dir = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base_dir / LOG_FILE_NAME / "logs"


def get_log_directory() -> Path:
    """
    Get the log directory for the current platform, creating it if needed.

    Falls back to ``./logs`` when the platform directory is not writable.

    Returns:
        Path: Existing log directory
    """
    log_dir = _platform_log_root()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir
    except OSError:
        fallback_dir = Path.cwd() / "logs"
        fallback_dir.mkdir(exist_ok=True)
        return fallback_dir


def get_log_file_path(config: Optional[LogConfig] = None) -> Path:
    """
    Get the full path to the log file.

    Args:
        config: LogConfig instance, uses default if None

    Returns:
        Path: Full path to the log file
    """
    config = config or LogConfig()
    return get_log_directory() / config.log_filename
