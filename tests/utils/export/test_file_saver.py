import json
from pathlib import Path
from unittest.mock import MagicMock

from bpdx.utils.export.file_saver import FileSaver

REPORT = {
    "metadata": {"email_address": "Alice.Smith@example.com", "total_items": 1},
    "data": {
        "buddypress-xprofile": [
            {
                "group_id": "bp_xprofile",
                "group_label": "Extended Profile Data",
                "item_id": "bp-xprofile-1",
                "data": [{"name": "Name", "value": "Alice"}],
            }
        ]
    },
}


def test_build_filename():
    filename = FileSaver.build_filename("Alice.Smith@example.com", "20260101_120000")

    assert filename == "personal-data-alice-smith-example-com_20260101_120000.json"


def test_build_filename_without_address():
    assert FileSaver.build_filename("", "ts") == "personal-data-unknown_ts.json"


def test_save_to_local(tmp_path, mocker):
    mocker.patch("bpdx.utils.export.file_saver.tqdm", return_value=MagicMock())
    mock_info = mocker.patch("bpdx.utils.export.file_saver.info")

    path = FileSaver.save_to_local(REPORT, output_dir=str(tmp_path / "out"))

    saved = json.loads(Path(path).read_text(encoding="utf-8"))
    assert saved == REPORT
    assert path.startswith(str((tmp_path / "out").resolve()))
    assert "personal-data-alice-smith-example-com_" in path
    mock_info.assert_called_once()


def test_save_to_local_custom_name(tmp_path, mocker):
    mocker.patch("bpdx.utils.export.file_saver.info")

    path = FileSaver.save_to_local(REPORT, output_dir=str(tmp_path), output_file="alice")

    assert path == str((tmp_path / "alice.json").resolve())
