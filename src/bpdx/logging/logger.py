"""
Main logging module for BPDX.

This module provides the primary logging interface, logger setup with
daily rotation, and the structured helpers used by the exporters.
"""

import logging
import logging.handlers
import sys
from typing import Optional, Dict, Any

from .config import LogConfig, LogLevel, get_log_file_path
from .formatters import BpdxFormatter, ExportPageFormatter, MultiplexFormatter
from .utils import cleanup_old_logs


# Global logger registry
_loggers: Dict[str, logging.Logger] = {}
_logging_configured = False
_log_config: Optional[LogConfig] = None


def _config_from_settings() -> LogConfig:
    """Defaults with the log level stored in the user's settings applied"""
    from bpdx.utils.config_store import ConfigStore

    return LogConfig.from_settings(ConfigStore().get_settings())


def setup_logging(config: Optional[LogConfig] = None, force_reconfigure: bool = False) -> None:
    """
    Set up the BPDX logging system.

    Args:
        config: LogConfig instance, uses default if None
        force_reconfigure: Force reconfiguration even if already set up
    """
    global _logging_configured, _log_config

    if _logging_configured and not force_reconfigure:
        return

    if config is None:
        try:
            config = _config_from_settings()
        except OSError:
            # Unreadable config directory
            config = LogConfig()

    _log_config = config

    log_file_path = get_log_file_path(config)

    root_logger = logging.getLogger("bpdx")
    root_logger.setLevel(getattr(logging, config.default_level.value))
    root_logger.handlers.clear()

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file_path,
        when='midnight',
        interval=1,
        backupCount=config.log_retention_days,
        encoding='utf-8',
        utc=False
    )
    file_handler.setLevel(getattr(logging, config.default_level.value))
    file_handler.suffix = "%Y-%m-%d"
    file_handler.setFormatter(
        MultiplexFormatter(
            BpdxFormatter(
                include_timestamps=config.include_timestamps,
                include_thread_info=config.include_thread_info,
                include_process_info=config.include_process_info,
                sanitize_sensitive=config.sanitize_sensitive_data,
                mask_emails=config.mask_email_addresses,
                sensitive_keys=config.sensitive_keys
            ),
            ExportPageFormatter(),
        )
    )
    root_logger.addHandler(file_handler)

    # Console only shows warnings and errors unless debugging
    if config.console_level != LogLevel.ERROR or config.default_level == LogLevel.DEBUG:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, config.console_level.value))
        console_handler.setFormatter(
            BpdxFormatter(
                include_timestamps=False,
                sanitize_sensitive=config.sanitize_sensitive_data,
                mask_emails=config.mask_email_addresses,
                sensitive_keys=config.sensitive_keys
            )
        )
        root_logger.addHandler(console_handler)

    export_logger = logging.getLogger("bpdx.export")
    export_logger.setLevel(
        logging.DEBUG if config.log_export_pages else logging.WARNING
    )

    try:
        cleanup_old_logs(log_file_path.parent, config.log_retention_days)
    except OSError:
        pass

    _logging_configured = True

    get_logger("bpdx.setup").info(
        f"Logging initialized - File: {log_file_path}, "
        f"Level: {config.default_level.value}"
    )


def get_log_config() -> LogConfig:
    """Configuration logging was set up with, or the defaults"""
    return _log_config or LogConfig()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (e.g., 'bpdx.exporters.activity')

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_configured:
        setup_logging()

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]


def log_export_page(
    exporter: str,
    page: int,
    item_count: int,
    done: bool,
    duration: Optional[float] = None,
    logger_name: str = "bpdx.export"
) -> None:
    """
    Log one page produced by an exporter.

    Args:
        exporter: Exporter key
        page: Page number that was requested
        item_count: Number of export items on the page
        done: Whether the exporter reported completion
        duration: Time spent on the page in seconds
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    extra = {
        "export_exporter": exporter,
        "export_page": page,
        "export_items": item_count,
        "export_done": done,
        "export_duration": duration or 0,
    }
    logger.debug("Export page completed", extra=extra)


def log_application_event(
    event: str,
    level: str = "info",
    details: Optional[Dict[str, Any]] = None,
    logger_name: str = "bpdx.app"
) -> None:
    """
    Log application-level events at appropriate levels.

    Args:
        event: Description of the event
        level: Log level (debug, info, warning, error)
        details: Additional event details (sanitized by the formatter)
        logger_name: Logger name to use
    """
    logger = get_logger(logger_name)
    extra = {"app_event": event}

    if details:
        from .utils import sanitize_data
        from bpdx.constants import SENSITIVE_KEYS
        extra["app_details"] = sanitize_data(details, SENSITIVE_KEYS)

    log_method = getattr(logger, level.lower(), logger.info)
    log_method(f"Application: {event}", extra=extra)
