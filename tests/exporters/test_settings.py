from bpdx.exporters.settings import GROUP_INVITES_LABEL, SettingsExporter

ALICE = "alice@example.com"


def values(result):
    return {f.name: f.value for f in result.data[0].data}


def test_single_item_and_always_done(host):
    result = SettingsExporter(host).export(ALICE, 1)

    assert len(result.data) == 1
    assert result.done is True
    assert result.data[0].item_id == "bp-settings-1"
    assert result.data[0].group_id == "bp_settings"
    assert result.data[0].group_label == "Settings"


def test_missing_value_defaults_to_yes(host):
    fields = values(SettingsExporter(host).export(ALICE))

    assert fields["Receive email when a member mentions you in an update?"] == "Yes"


def test_explicit_no_projects_to_no(host):
    fields = values(SettingsExporter(host).export(ALICE))

    assert fields[
        "Receive email when a member replies to an update or comment you've posted?"
    ] == "No"


def test_empty_string_defaults_to_yes(make_host):
    host = make_host(user_meta={"1": {"notification_messages_new_message": ""}})

    fields = values(SettingsExporter(host).export(ALICE))

    assert fields["Receive email when a member sends you a new message?"] == "Yes"


def test_any_non_yes_value_is_no(make_host):
    host = make_host(user_meta={"1": {"notification_groups_group_updated": "off"}})

    fields = values(SettingsExporter(host).export(ALICE))

    assert fields["Receive email when group information is updated?"] == "No"


def test_all_components_give_eight_preferences(host):
    result = SettingsExporter(host).export(ALICE)

    assert len(result.data[0].data) == 8


def test_preferences_follow_active_components(make_host):
    host = make_host(active_components=["settings", "messages"])

    result = SettingsExporter(host).export(ALICE)

    assert [f.name for f in result.data[0].data] == [
        "Receive email when a member sends you a new message?"
    ]


def test_group_invites_flag_only_with_nouveau(make_host):
    without = make_host()
    with_nouveau = make_host(
        active_components=["settings", "nouveau"],
        group_invites_setting={"1": True},
    )

    assert GROUP_INVITES_LABEL not in values(SettingsExporter(without).export(ALICE))
    assert values(SettingsExporter(with_nouveau).export(ALICE)) == {
        GROUP_INVITES_LABEL: "Yes"
    }


def test_unknown_email(host):
    assert SettingsExporter(host).export("who@example.com").to_dict() == {
        "data": [],
        "done": True,
    }
