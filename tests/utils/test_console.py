import bpdx.utils.console as console_utils


def test_success_prints(mocker):
    mock_print = mocker.patch.object(console_utils.console, "print")
    console_utils.success("ok")
    mock_print.assert_called_once()


def test_error_prints(mocker):
    mock_print = mocker.patch.object(console_utils.console, "print")
    console_utils.error("fail")
    mock_print.assert_called_once()


def test_create_table_with_styles():
    table = console_utils.create_table("Title", ["a", "b"], styles=["cyan"])

    assert table.title == "Title"
    assert [c.header for c in table.columns] == ["a", "b"]
    assert table.columns[0].style == "cyan"
    assert not table.columns[1].style


def test_display_report_summary(mocker):
    panel = mocker.patch.object(console_utils, "display_panel")
    metadata = {
        "email_address": "alice@example.com",
        "items_per_exporter": {"buddypress-activity": 2},
        "pages_per_exporter": {"buddypress-activity": 1},
        "total_items": 2,
    }

    console_utils.display_report_summary(metadata, "/tmp/out.json")

    text, title, style = panel.call_args[0]
    assert title == "Export Summary"
    assert "buddypress-activity: 2 items (1 pages)" in text
    assert text.endswith("Saved to: /tmp/out.json")
