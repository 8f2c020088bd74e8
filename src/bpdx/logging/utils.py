"""
Utility functions for BPDX logging.

This module provides helper functions for data sanitization,
log management, and logging-related operations. Exports are driven by
email address, so addresses are masked wherever they reach a log.
"""

import re
from typing import Any, Dict, List, Tuple
from pathlib import Path
from datetime import datetime, timedelta

EMAIL_PATTERN = re.compile(
    r"(?P<local>[A-Za-z0-9._%+\-]+)@(?P<domain>[A-Za-z0-9.\-]+\.[A-Za-z]{2,})"
)


def mask_email(email: str) -> str:
    """
    Mask the local part of an email address.

    Args:
        email: Address to mask

    Returns:
        str: Address with all but the first character of the local part hidden
    """
    match = EMAIL_PATTERN.fullmatch(email.strip()) if email else None
    if not match:
        return "***"
    return f"{match.group('local')[0]}***@{match.group('domain')}"


def sanitize_data(data: Any, sensitive_keys: Tuple[str, ...]) -> Any:
    """
    Recursively sanitize sensitive data from dictionaries, lists, and strings.

    Args:
        data: Data to sanitize (dict, list, str, or other)
        sensitive_keys: Tuple of keys/patterns to sanitize

    Returns:
        Any: Sanitized data with sensitive values replaced
    """
    if isinstance(data, dict):
        return sanitize_dict(data, sensitive_keys)
    elif isinstance(data, list):
        return sanitize_list(data, sensitive_keys)
    elif isinstance(data, str):
        return sanitize_string(data)
    else:
        return data


def sanitize_dict(data: Dict[str, Any], sensitive_keys: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Sanitize sensitive values in a dictionary.

    Args:
        data: Dictionary to sanitize
        sensitive_keys: Keys to sanitize

    Returns:
        Dict: Sanitized dictionary
    """
    sanitized = {}

    for key, value in data.items():
        key_lower = str(key).lower()

        is_sensitive = any(
            sensitive_key.lower() in key_lower
            for sensitive_key in sensitive_keys
        )

        if is_sensitive:
            if isinstance(value, str) and EMAIL_PATTERN.fullmatch(value.strip()):
                sanitized[key] = mask_email(value)
            else:
                sanitized[key] = "***"
        else:
            sanitized[key] = sanitize_data(value, sensitive_keys)

    return sanitized


def sanitize_list(data: List[Any], sensitive_keys: Tuple[str, ...]) -> List[Any]:
    """
    Sanitize sensitive values in a list.

    Args:
        data: List to sanitize
        sensitive_keys: Keys to sanitize

    Returns:
        List: Sanitized list
    """
    return [sanitize_data(item, sensitive_keys) for item in data]


def sanitize_string(data: str) -> str:
    """
    Sanitize sensitive patterns in free text.

    Args:
        data: String to sanitize

    Returns:
        str: Sanitized string
    """
    sanitized = EMAIL_PATTERN.sub(lambda m: mask_email(m.group(0)), data)
    sanitized = re.sub(
        r"([?&](?:token|key|secret|password|_wpnonce)=)[^&\s]+",
        r"\1***",
        sanitized,
        flags=re.IGNORECASE,
    )
    return sanitized


def format_size(size_bytes: int) -> str:
    """
    Format byte size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        str: Formatted size string
    """
    if size_bytes < 1024:
        return f"{size_bytes}B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f}KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f}MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.1f}GB"


def cleanup_old_logs(log_directory: Path, retention_days: int = 30) -> int:
    """
    Clean up old log files based on retention policy.

    Args:
        log_directory: Directory containing log files
        retention_days: Number of days to retain logs

    Returns:
        int: Number of files cleaned up
    """
    if not log_directory.exists():
        return 0

    cutoff_date = datetime.now() - timedelta(days=retention_days)
    cleaned_count = 0

    for log_file in log_directory.glob("bpdx.log.*"):
        try:
            if log_file.stat().st_mtime < cutoff_date.timestamp():
                log_file.unlink()
                cleaned_count += 1
        except (OSError, ValueError):
            continue

    return cleaned_count
