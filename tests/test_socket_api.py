from __future__ import annotations

from sentinel import BANNER

from .conftest import ADMIN_EMAIL


def _events(client, name):
    return [msg["args"] for msg in client.get_received() if msg["name"] == name]


def test_health_banner(app):
    resp = app.test_client().get("/")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == BANNER


def test_admin_sees_registration_and_heartbeat(connect):
    admin, _ = connect()
    user, user_id = connect()

    admin.emit("admin_login", ADMIN_EMAIL)
    received = admin.get_received()
    assert [msg["name"] for msg in received] == ["admin_auth_success", "sessions_list"]
    assert received[1]["args"][0] == []

    user.emit("register_user", {"name": "alice"})
    [[sessions]] = _events(admin, "sessions_list")
    assert sessions[0]["id"] == user_id
    assert sessions[0]["name"] == "alice"

    user.emit("heartbeat", {"battery": 80})
    [[update]] = _events(admin, "session_update")
    assert (update["name"], update["battery"]) == ("alice", 80)

    user.emit("client_data", {"type": "photo", "data": "data:image/png;base64,AAA"})
    [[update]] = _events(admin, "session_update")
    assert update["photo"] == "data:image/png;base64,AAA"


def test_denied_admin_cannot_issue_commands(connect):
    intruder, _ = connect()
    target, target_id = connect()

    intruder.emit("admin_login", "intruder@example.com")
    assert _events(intruder, "admin_auth_error") == [["Unauthorized email"]]

    intruder.emit("admin_command", {"targetId": target_id, "command": {"type": "START_CAM"}})
    assert target.get_received() == []


def test_admin_command_relayed(connect):
    admin, _ = connect()
    target, target_id = connect()
    admin.emit("admin_login", ADMIN_EMAIL)

    admin.emit("admin_command", {"targetId": target_id, "command": {"type": "START_CAM", "payload": 1}})

    assert _events(target, "server_command") == [[{"type": "START_CAM", "payload": 1}]]


def test_watch_party_flow(connect):
    leader, leader_id = connect()
    guest, guest_id = connect()

    leader.emit("create_room", {"url": "https://example.com/v.mp4"})
    [[created]] = _events(leader, "room_created")
    assert created["isLeader"] is True
    room_id = created["roomId"]

    guest.emit("join_room", {"roomId": room_id, "userMetadata": {"name": "guest"}})
    [[joined]] = _events(guest, "room_joined")
    assert joined["isLeader"] is False
    assert [m["id"] for m in joined["members"]] == [leader_id, guest_id]
    assert _events(leader, "room_user_joined") == [[{"userId": guest_id, "user": {"name": "guest"}}]]

    leader.emit("sync_action", {"type": "PLAY", "payload": 3})
    assert _events(guest, "sync_update") == [[{"type": "PLAY", "payload": 3}]]
    assert leader.get_received() == []

    guest.emit("sync_action", {"type": "PAUSE"})
    assert leader.get_received() == []

    guest.emit("room_chat_message", "hi all")
    [[message]] = _events(leader, "room_message")
    assert (message["userId"], message["userName"], message["text"]) == (guest_id, "Anonymous", "hi all")
    assert len(_events(guest, "room_message")) == 1

    leader.disconnect()
    received = guest.get_received()
    names = [msg["name"] for msg in received]
    assert names == ["room_user_left", "room_leader_changed", "you_are_leader"]
    assert received[1]["args"][0] == {"newLeaderId": guest_id}


def test_join_errors(connect):
    guest, _ = connect()

    guest.emit("join_room", {"roomId": "999999"})
    assert _events(guest, "error") == [["Room not found"]]

    owner_ids = []
    for _ in range(8):
        client, _ = connect()
        owner_ids.append(client)
    owner_ids[0].emit("create_room", None)
    [[created]] = _events(owner_ids[0], "room_created")
    for client in owner_ids[1:]:
        client.emit("join_room", {"roomId": created["roomId"]})

    guest.emit("join_room", {"roomId": created["roomId"]})
    [[reason]] = _events(guest, "error")
    assert reason.startswith("Room is full")


def test_room_events_without_room_are_ignored(connect):
    client, _ = connect()

    client.emit("sync_action", {"type": "PLAY"})
    client.emit("room_chat_message", "hello?")
    client.emit("leave_room")

    assert client.get_received() == []
