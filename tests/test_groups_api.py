"""API tests for groups, invitations and notifications."""

from datetime import datetime, timedelta, timezone

import pytest

from mentora.stores.models import Notification

from conftest import login


@pytest.fixture
async def group(client):
    await login(client, "owner@example.com", "Olivia Owner")
    await login(client, "ada@example.com", "Ada Lovelace")
    response = await client.post("/api/groups", json={"name": "Physics Club", "ownerId": "owner@example.com"})
    assert response.status_code == 201
    return response.json()["group"]


async def _invite(client, group_id, invited="ada@example.com", inviter="owner@example.com"):
    return await client.post(
        "/api/groups/invite",
        json={"groupId": group_id, "invitedUserId": invited, "inviterUserId": inviter},
    )


class TestGroups:
    async def test_create_and_fetch(self, client, group):
        assert group["name"] == "Physics Club"
        assert group["ownerId"] == "owner@example.com"
        assert group["members"] == ["owner@example.com"]

        fetched = (await client.get(f"/api/groups/{group['id']}")).json()["group"]
        assert fetched == group

    async def test_fetch_unknown_group(self, client):
        response = await client.get("/api/groups/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "Group not found"


class TestInvite:
    async def test_invite_creates_notification(self, client, group):
        response = await _invite(client, group["id"])

        assert response.status_code == 200
        notification = response.json()["notification"]
        assert notification["type"] == "group_invite"
        assert notification["title"] == "Group Invitation"
        assert notification["message"] == 'Olivia Owner invited you to join "Physics Club"'
        assert notification["data"] == {
            "groupId": group["id"],
            "inviterUserId": "owner@example.com",
            "groupName": "Physics Club",
        }
        assert notification["read"] is False

        inbox = (await client.get("/api/notifications/ada@example.com")).json()["notifications"]
        assert [n["id"] for n in inbox] == [notification["id"]]

    async def test_unknown_inviter_named_someone(self, client, group):
        response = await _invite(client, group["id"], inviter="ghost@example.com")

        assert response.json()["notification"]["message"].startswith("Someone invited you")

    async def test_invite_does_not_change_membership(self, client, group):
        await _invite(client, group["id"])

        fetched = (await client.get(f"/api/groups/{group['id']}")).json()["group"]
        assert fetched["members"] == ["owner@example.com"]

    async def test_unknown_group(self, client, group):
        response = await _invite(client, "missing")

        assert response.status_code == 404
        assert response.json()["error"] == "Group not found"

    async def test_unknown_invitee(self, client, group):
        response = await _invite(client, group["id"], invited="nobody@example.com")

        assert response.status_code == 404
        assert response.json()["error"] == "User not found"


class TestAcceptInvite:
    async def test_accept_adds_member_and_marks_read(self, client, group):
        notification = (await _invite(client, group["id"])).json()["notification"]

        response = await client.post(
            "/api/groups/accept-invite",
            json={"notificationId": notification["id"], "userId": "ada@example.com"},
        )

        assert response.status_code == 200
        assert response.json()["group"]["members"] == ["owner@example.com", "ada@example.com"]
        inbox = (await client.get("/api/notifications/ada@example.com")).json()["notifications"]
        assert inbox[0]["read"] is True

    async def test_accept_twice_is_idempotent(self, client, group):
        notification = (await _invite(client, group["id"])).json()["notification"]
        payload = {"notificationId": notification["id"], "userId": "ada@example.com"}

        first = (await client.post("/api/groups/accept-invite", json=payload)).json()
        second = (await client.post("/api/groups/accept-invite", json=payload)).json()

        assert first["group"]["members"] == second["group"]["members"]
        assert second["group"]["members"].count("ada@example.com") == 1

    async def test_unknown_invitation(self, client, group):
        response = await client.post(
            "/api/groups/accept-invite",
            json={"notificationId": "missing", "userId": "ada@example.com"},
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Invitation not found"

    async def test_non_invite_notification_rejected(self, client, stores, group):
        other = stores.notifications.add(
            "ada@example.com", Notification(type="info", title="Hi", message="Welcome")
        )

        response = await client.post(
            "/api/groups/accept-invite",
            json={"notificationId": other.id, "userId": "ada@example.com"},
        )

        assert response.status_code == 404

    async def test_someone_elses_invitation_not_found(self, client, group):
        notification = (await _invite(client, group["id"])).json()["notification"]

        response = await client.post(
            "/api/groups/accept-invite",
            json={"notificationId": notification["id"], "userId": "owner@example.com"},
        )

        assert response.status_code == 404


class TestNotifications:
    async def test_sorted_newest_first(self, client, stores):
        base = datetime(2026, 3, 1, tzinfo=timezone.utc)
        for minutes in (5, 1, 9):
            stores.notifications.add(
                "ada@example.com",
                Notification(
                    type="info", title=f"t{minutes}", message="m",
                    timestamp=base + timedelta(minutes=minutes),
                ),
            )

        body = (await client.get("/api/notifications/ada@example.com")).json()

        assert [n["title"] for n in body["notifications"]] == ["t9", "t5", "t1"]

    async def test_empty_inbox(self, client):
        body = (await client.get("/api/notifications/nobody@example.com")).json()

        assert body == {"success": True, "notifications": []}

    async def test_mark_read(self, client, stores):
        notification = stores.notifications.add(
            "ada@example.com", Notification(type="info", title="t", message="m")
        )

        response = await client.post(
            f"/api/notifications/{notification.id}/read", json={"userId": "ada@example.com"}
        )

        assert response.status_code == 200
        assert response.json()["notification"]["read"] is True
        assert notification.read is True

    async def test_mark_read_unknown_is_noop(self, client):
        response = await client.post(
            "/api/notifications/missing/read", json={"userId": "ada@example.com"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "notification": None}
