import pytest

from bpdx.exporters.groups import (
    GroupMembershipsExporter,
    GroupPendingReceivedInvitationsExporter,
    GroupPendingRequestsExporter,
    GroupPendingSentInvitationsExporter,
    MembershipType,
    get_user_memberships,
    group_role,
)
from bpdx.host.models import Group, Membership, User

ALICE = "alice@example.com"
BOB_LINK = '<a href="https://example.org/members/bob/">Bob</a>'
CAROL_LINK = '<a href="https://example.org/members/carol/">Carol</a>'
DAVE_LINK = '<a href="https://example.org/members/dave/">Dave</a>'


def fields(item):
    return [(f.name, f.value) for f in item.data]


class TestGroupRole:
    user = User(id=1, email=ALICE)

    def membership(self, **flags):
        return Membership(id=1, group_id=5, user_id=1, **flags)

    def test_creator_wins_over_admin_flag(self):
        group = Group(id=5, name="g", slug="g", creator_id=1)

        assert group_role(self.user, group, self.membership(is_admin=True)) == "Creator"

    @pytest.mark.parametrize(
        "flags, role",
        [
            ({"is_admin": True}, "Admin"),
            ({"is_admin": True, "is_mod": True}, "Admin"),
            ({"is_mod": True}, "Moderator"),
            ({}, "Member"),
        ],
    )
    def test_flags(self, flags, role):
        group = Group(id=5, name="g", slug="g", creator_id=2)

        assert group_role(self.user, group, self.membership(**flags)) == role


class TestGetUserMemberships:
    @pytest.mark.parametrize(
        "membership_type, ids",
        [
            (MembershipType.MEMBERSHIP, [1, 2]),
            (MembershipType.PENDING_REQUEST, [3]),
            (MembershipType.PENDING_RECEIVED_INVITATION, [4]),
            (MembershipType.PENDING_SENT_INVITATION, [5]),
        ],
    )
    def test_filters(self, host, membership_type, ids):
        records = get_user_memberships(host, 1, membership_type)

        assert [m.id for m in records] == ids

    def test_paging(self, host):
        assert [m.id for m in get_user_memberships(host, 1, page=2, per_page=1)] == [2]
        assert get_user_memberships(host, 1, page=3, per_page=1) == []

    def test_invalid_page(self, host):
        with pytest.raises(ValueError):
            get_user_memberships(host, 1, page=0)


def test_memberships(host):
    result = GroupMembershipsExporter(host).export(ALICE, 1)

    assert result.done is True
    assert [i.item_id for i in result.data] == [
        "bp-group-membership-5",
        "bp-group-membership-6",
    ]
    assert fields(result.data[0]) == [
        ("Group Name", "Chess Club"),
        ("Group URL", "https://example.org/groups/chess-club/"),
        ("Group Role", "Creator"),
        ("Date Joined", "2018-01-01 00:00:00"),
    ]
    assert fields(result.data[1]) == [
        ("Group Name", "Go Club"),
        ("Group URL", "https://example.org/groups/go-club/"),
        ("Invited By", BOB_LINK),
        ("Group Role", "Member"),
        ("Date Joined", "2018-01-02 00:00:00"),
    ]


def test_group_role_is_translated(make_host):
    host = make_host(translations={"Creator": "Créateur"})

    item = GroupMembershipsExporter(host).export(ALICE).data[0]

    assert ("Group Role", "Créateur") in fields(item)


def test_pending_requests(host):
    result = GroupPendingRequestsExporter(host).export(ALICE, 1)

    assert [i.item_id for i in result.data] == ["bp-group-pending-request-7"]
    assert fields(result.data[0]) == [
        ("Group Name", "Book Club"),
        ("Group URL", "https://example.org/groups/book-club/"),
        ("Date Sent", "2018-01-03 00:00:00"),
    ]


def test_pending_received_invitations(host):
    result = GroupPendingReceivedInvitationsExporter(host).export(ALICE, 1)

    assert [i.item_id for i in result.data] == ["bp-group-pending-received-invitation-7"]
    assert fields(result.data[0])[2:] == [
        ("Invited By", CAROL_LINK),
        ("Date Sent", "2018-01-04 00:00:00"),
    ]


def test_pending_sent_invitations(host):
    result = GroupPendingSentInvitationsExporter(host).export(ALICE, 1)

    assert [i.item_id for i in result.data] == ["bp-group-pending-sent-invitation-5"]
    assert fields(result.data[0])[2:] == [
        ("Sent To", DAVE_LINK),
        ("Date Sent", "2018-01-05 00:00:00"),
    ]


def test_invitee_sees_invitation_as_received(host):
    result = GroupPendingReceivedInvitationsExporter(host).export("dave@example.com")

    assert [i.item_id for i in result.data] == ["bp-group-pending-received-invitation-5"]


def test_groups_page_size(make_host):
    groups = [{"id": n, "name": f"G{n}", "slug": f"g{n}", "creator_id": 2}
              for n in range(1, 22)]
    memberships = [{"id": n, "group_id": n, "user_id": 1, "is_confirmed": True}
                   for n in range(1, 22)]
    exporter = GroupMembershipsExporter(make_host(groups=groups, memberships=memberships))

    first = exporter.export(ALICE, 1)
    second = exporter.export(ALICE, 2)

    assert len(first.data) == 20
    assert first.done is False
    assert [i.item_id for i in second.data] == ["bp-group-membership-21"]
    assert second.done is True
