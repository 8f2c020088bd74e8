import pytest

from bpdx.exporters import ExportItem, ExportPage, RegisteredExporter, register_exporters
from bpdx.utils.export.runner import ExportRunner

ALICE = "alice@example.com"


def paged_callback(total, per_page):
    """Callback producing ``total`` items in pages of ``per_page``"""
    calls = []

    def callback(email_address, page=1):
        calls.append(page)
        start = (page - 1) * per_page
        ids = range(start, min(start + per_page, total))
        items = [ExportItem("bp_fake", "Fake", f"bp-fake-{i}") for i in ids]
        return ExportPage(data=items, done=len(items) < per_page)

    callback.calls = calls
    return callback


def test_runs_all_pages_until_done():
    callback = paged_callback(total=7, per_page=3)
    runner = ExportRunner({"buddypress-fake": RegisteredExporter("Fake", callback)})

    items, pages = runner.run_exporter("buddypress-fake", ALICE)

    assert [i["item_id"] for i in items] == [f"bp-fake-{n}" for n in range(7)]
    assert pages == 3
    assert callback.calls == [1, 2, 3]


def test_max_pages_guard():
    endless = RegisteredExporter("Endless", lambda email, page=1: ExportPage(done=False))
    runner = ExportRunner({"buddypress-endless": endless}, max_pages=4)

    with pytest.raises(RuntimeError, match="4 pages"):
        runner.run_exporter("buddypress-endless", ALICE)


def test_select_accepts_short_and_full_keys(host):
    runner = ExportRunner(register_exporters({}, host))

    selected = runner.select(["friends", "buddypress-activity"])

    assert selected == ["buddypress-activity", "buddypress-friends"]


def test_select_unknown_key(host):
    runner = ExportRunner(register_exporters({}, host))

    with pytest.raises(KeyError):
        runner.select(["forums"])


def test_select_everything_by_default(host):
    exporters = register_exporters({}, host)

    assert ExportRunner(exporters).select() == list(exporters)


def test_run_builds_report(host):
    runner = ExportRunner(register_exporters({}, host))

    report = runner.run(ALICE)

    data = report["data"]
    assert len(data["buddypress-activity"]) == 2
    assert len(data["buddypress-messages"]) == 2
    assert len(data["buddypress-groups-memberships"]) == 2
    assert report["metadata"]["email_address"] == ALICE
    assert report["metadata"]["total_items"] == sum(len(v) for v in data.values())


def test_run_unknown_address_yields_no_items(host):
    report = ExportRunner(register_exporters({}, host)).run("nobody@example.com")

    assert all(items == [] for items in report["data"].values())
    assert set(report["metadata"]["pages_per_exporter"].values()) == {1}


def test_run_propagates_exporter_errors(mocker):
    failing = mocker.Mock(side_effect=RuntimeError("query failed"))
    runner = ExportRunner({"buddypress-broken": RegisteredExporter("Broken", failing)})

    with pytest.raises(RuntimeError, match="query failed"):
        runner.run(ALICE)
