"""
BPDX Logging Module

This module provides logging for the BPDX exporters and CLI. Export
runs handle personal data, so every formatter masks email addresses and
sensitive keys before a record is written.

Key Features:
- Single log file with daily rotation
- Cross-platform log directory detection
- One structured record per exporter page
- Automatic sanitization of sensitive data
- Log level configurable from the user's settings
"""

from .logger import (
    get_logger,
    setup_logging,
    get_log_config,
    log_export_page,
    log_application_event,
)
from .config import LogConfig, LogLevel
from .utils import sanitize_data, mask_email

__all__ = [
    "get_logger",
    "setup_logging",
    "get_log_config",
    "log_export_page",
    "log_application_event",
    "LogLevel",
    "LogConfig",
    "sanitize_data",
    "mask_email",
]
