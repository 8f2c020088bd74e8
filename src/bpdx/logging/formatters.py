"""
Custom formatters for BPDX logging.

This module provides specialized formatters for general application logs
and for the per-page records written while exporters run.
"""

import logging
from datetime import datetime
from .utils import sanitize_data, sanitize_string
from bpdx.constants import SENSITIVE_KEYS


class BpdxFormatter(logging.Formatter):
    """
    Custom formatter for BPDX log entries.

    Provides structured formatting with optional components and
    automatic sanitization of sensitive data and email addresses.
    """

    def __init__(
        self,
        include_timestamps: bool = True,
        include_thread_info: bool = False,
        include_process_info: bool = False,
        sanitize_sensitive: bool = True,
        mask_emails: bool = True,
        sensitive_keys: tuple = None,
    ):
        self.include_timestamps = include_timestamps
        self.sanitize_sensitive = sanitize_sensitive
        self.mask_emails = mask_emails
        self.sensitive_keys = sensitive_keys or SENSITIVE_KEYS
        fmt_parts = []
        if include_timestamps:
            fmt_parts.append("%(asctime)s")
        fmt_parts.extend(["%(levelname)s", "[%(name)s]", "%(message)s"])
        if include_thread_info:
            fmt_parts.insert(-1, "[Thread:%(thread)d]")
        if include_process_info:
            fmt_parts.insert(-1, "[PID:%(process)d]")
        super().__init__(fmt=" ".join(fmt_parts), datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record with optional sanitization.

        Args:
            record: The log record to format

        Returns:
            str: Formatted log message
        """
        if self.sanitize_sensitive:
            if isinstance(record.msg, (dict, list)):
                record.msg = sanitize_data(record.msg, self.sensitive_keys)
            elif isinstance(record.args, (tuple, list)):
                record.args = tuple(
                    sanitize_data(arg, self.sensitive_keys)
                    if isinstance(arg, (dict, list))
                    else arg
                    for arg in record.args
                )

        output = super().format(record)
        if self.mask_emails:
            output = sanitize_string(output)
        return output


class ExportPageFormatter(logging.Formatter):
    """
    Specialized formatter for exporter page records.

    One line per page: exporter key, page number, item count, whether
    pagination finished, and how long the page took.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        exporter = getattr(record, "export_exporter", "unknown")
        page = getattr(record, "export_page", "-")
        items = getattr(record, "export_items", 0)
        done = "done" if getattr(record, "export_done", False) else "more"
        duration = round(getattr(record, "export_duration", 0) * 1000, 2)

        line = (
            f"{timestamp} {record.levelname} [{record.name}] "
            f"{exporter} page={page} items={items} -> {done} ({duration}ms)"
        )
        return sanitize_string(line)


class MultiplexFormatter(logging.Formatter):
    """
    Formatter that delegates to different formatters based on the log record.

    Uses ExportPageFormatter for page records and BpdxFormatter for
    everything else.
    """

    def __init__(
        self, default_formatter: logging.Formatter, page_formatter: logging.Formatter
    ):
        self.default_formatter = default_formatter
        self.page_formatter = page_formatter
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        if record.name == "bpdx.export" or hasattr(record, "export_exporter"):
            return self.page_formatter.format(record)
        return self.default_formatter.format(record)
