import os
from datetime import datetime, timedelta

import pytest

from bpdx.logging.utils import (
    cleanup_old_logs,
    format_size,
    mask_email,
    sanitize_data,
    sanitize_dict,
    sanitize_list,
    sanitize_string,
)


def test_mask_email_keeps_first_character_and_domain():
    assert mask_email("alice@example.com") == "a***@example.com"


@pytest.mark.parametrize("value", ["", "not-an-email", "@example.com"])
def test_mask_email_invalid(value):
    assert mask_email(value) == "***"


def test_sanitize_dict_masks_sensitive_key():
    data = {"token": "supersecret", "name": "john"}
    result = sanitize_dict(data, ("token",))

    assert result["token"] == "***"
    assert result["name"] == "john"


def test_sanitize_dict_masks_email_values_readably():
    result = sanitize_dict({"email_address": "bob@example.com"}, ("email",))

    assert result["email_address"] == "b***@example.com"


def test_sanitize_list_masks_nested_data():
    data = [{"password": "secret"}, {"x": 1}]
    result = sanitize_list(data, ("password",))

    assert result[0]["password"] == "***"
    assert result[1]["x"] == 1


def test_sanitize_data_masks_addresses_in_free_text():
    result = sanitize_data("export for carol@example.org started", ("token",))

    assert result == "export for c***@example.org started"


def test_sanitize_string_query_secret():
    url = "https://example.org/wp-admin/?_wpnonce=abcdef&page=2"
    result = sanitize_string(url)

    assert "_wpnonce=***" in result
    assert "page=2" in result


def test_format_size_bytes():
    assert format_size(512) == "512B"


def test_format_size_kb():
    assert format_size(1024) == "1.0KB"


def test_format_size_mb():
    assert format_size(1024 * 1024) == "1.0MB"


def test_cleanup_old_logs_removes_old_files(tmp_path):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()

    old_file = log_dir / "bpdx.log.1"
    new_file = log_dir / "bpdx.log.2"
    current = log_dir / "bpdx.log"

    for path in (old_file, new_file, current):
        path.write_text("x")

    old_time = (datetime.now() - timedelta(days=40)).timestamp()
    new_time = (datetime.now() - timedelta(days=1)).timestamp()

    os.utime(old_file, (old_time, old_time))
    os.utime(new_file, (new_time, new_time))
    os.utime(current, (old_time, old_time))

    removed = cleanup_old_logs(log_dir, retention_days=30)

    assert removed == 1
    assert not old_file.exists()
    assert new_file.exists()
    assert current.exists()


def test_cleanup_old_logs_missing_directory(tmp_path):
    assert cleanup_old_logs(tmp_path / "missing") == 0
