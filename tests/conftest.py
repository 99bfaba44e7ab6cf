"""Shared fixtures: base64 helpers and raw frame builders."""

import base64
from typing import Any, Optional

import pytest

from zoomer.models.events import EventKind
from zoomer.session import RecordingSession

BOT_ID = 16778240


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def roster_frame(*people: tuple[int, str], seq: int = 1) -> dict[str, Any]:
    return {
        "evt": EventKind.WS_CONF_ROSTER_INDICATION,
        "seq": seq,
        "body": {"add": [{"id": pid, "dn2": b64(name)} for pid, name in people]},
    }


def chat_frame(text: str, dest: int = 16779264, seq: int = 1, msg_id: Optional[str] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"text": b64(text), "destNodeID": dest, "senderName": b64("Alice")}
    if msg_id:
        body["msgID"] = msg_id
    return {"evt": EventKind.WS_CONF_CHAT_INDICATION, "seq": seq, "body": body}


def keepalive_frame() -> dict[str, Any]:
    return {"evt": EventKind.WS_CONN_KEEPALIVE, "seq": 0}


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession(self_user_id=BOT_ID)
