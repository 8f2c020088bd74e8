from bpdx.exporters.models import ExportField, ExportItem, ExportPage


def test_add_field_coerces_and_chains():
    item = ExportItem(group_id="bp_x", group_label="X", item_id="bp-x-1")

    returned = item.add_field("Count", 3).add_field("Missing", None)

    assert returned is item
    assert item.data == [ExportField("Count", "3"), ExportField("Missing", "")]


def test_page_to_dict():
    item = ExportItem("bp_x", "X", "bp-x-1").add_field("Name", "Jo")
    page = ExportPage(data=[item], done=False)

    assert page.to_dict() == {
        "data": [
            {
                "group_id": "bp_x",
                "group_label": "X",
                "item_id": "bp-x-1",
                "data": [{"name": "Name", "value": "Jo"}],
            }
        ],
        "done": False,
    }


def test_empty_page():
    assert ExportPage.empty().to_dict() == {"data": [], "done": True}
