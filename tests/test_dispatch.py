"""End-to-end envelope dispatch."""

import json

import pytest

from conftest import BOT_ID, chat_frame, keepalive_frame, roster_frame
from zoomer.config import BotConfig
from zoomer.dispatch import Dispatcher
from zoomer.errors import DecodeError
from zoomer.models.chat import EVERYONE_CHAT_ID
from zoomer.models.envelope import Envelope
from zoomer.models.events import EventKind
from zoomer.session import SessionCall
from zoomer.transport import envelope as envelope_module
from zoomer.transport.envelope import parse_envelope


class TestOnEnvelope:
    def test_keepalive_never_decoded(self, session, monkeypatch):
        def boom(_):
            raise AssertionError("decoder called for keepalive")
        monkeypatch.setattr("zoomer.dispatch.decode_payload", boom)

        assert Dispatcher().on_envelope(session, parse_envelope(keepalive_frame())) is False
        assert session.calls == []

    def test_roster_welcomes(self, session):
        frame = roster_frame((1, "Ann"), (BOT_ID, "Bot"), (2, "Bob"))
        assert Dispatcher().on_envelope(session, parse_envelope(frame)) is True
        assert session.calls == [
            SessionCall("send_chat_message", EVERYONE_CHAT_ID, "Welcome to the meeting, Ann!"),
            SessionCall("send_chat_message", EVERYONE_CHAT_ID, "Welcome to the meeting, Bob!"),
        ]

    def test_chat_command(self, session):
        Dispatcher().on_envelope(session, parse_envelope(chat_frame("++chatlevel 2")))
        assert session.calls == [SessionCall("set_chat_level", 2)]

    def test_decode_error_propagates(self, session):
        env = Envelope(kind=31337, payload={})
        with pytest.raises(DecodeError):
            Dispatcher().on_envelope(session, env)
        assert session.calls == []

    def test_prefix_from_config(self, session):
        Dispatcher(BotConfig(prefix="!")).on_envelope(session, parse_envelope(chat_frame("!rename X")))
        assert session.calls == [SessionCall("rename_me", "X")]

    @pytest.mark.parametrize("kind", [
        EventKind.WS_CONF_JOIN_RES,
        EventKind.WS_CONF_ATTRIBUTE_INDICATION,
        EventKind.WS_SHARING_STATUS_INDICATION,
    ])
    def test_known_unhandled_kind_is_ignored(self, session, kind):
        env = Envelope(kind=kind, payload={"lock": False})
        assert Dispatcher().on_envelope(session, env) is False
        assert session.calls == []


class TestPump:
    def test_mixed_stream(self, session, caplog):
        frames = [
            keepalive_frame(),
            roster_frame((5, "Eve"), seq=2),
            json.dumps(chat_frame("++mute off", seq=3)),
            {"evt": EventKind.WS_CONF_JOIN_RES, "body": {}},
            "garbage",
            chat_frame("just chatting", seq=4),
            keepalive_frame(),
        ]
        with caplog.at_level("WARNING", logger="zoomer.dispatch"):
            stats = Dispatcher().pump(session, frames)

        assert stats.as_dict() == {"received": 7, "ignored": 3, "handled": 3, "failed": 1}
        assert session.calls == [
            SessionCall("send_chat_message", EVERYONE_CHAT_ID, "Welcome to the meeting, Eve!"),
            SessionCall("set_audio_muted", False),
            SessionCall("set_video_muted", False),
        ]
        assert "Frame 4" not in caplog.text
        assert "Frame 5" in caplog.text

    def test_join_response_does_not_stop_loop(self, session):
        frames = [{"evt": EventKind.WS_CONF_JOIN_RES, "seq": 1, "body": {"userID": BOT_ID}}, chat_frame("++mute")]
        stats = Dispatcher(BotConfig(stop_on_decode_error=True)).pump(session, frames)
        assert stats.as_dict() == {"received": 2, "ignored": 1, "handled": 1, "failed": 0}
        assert [c.name for c in session.calls] == ["set_audio_muted", "set_video_muted"]

    def test_unknown_kind_stops_loop_when_configured(self, session):
        frames = [{"evt": 31337, "body": {}}, chat_frame("++mute")]
        with pytest.raises(DecodeError):
            Dispatcher(BotConfig(stop_on_decode_error=True)).pump(session, frames)
        assert session.calls == []

    def test_stop_on_decode_error(self, session):
        frames = [chat_frame("++mute"), "garbage", chat_frame("++rename Never")]
        with pytest.raises(DecodeError):
            Dispatcher(BotConfig(stop_on_decode_error=True)).pump(session, frames)
        assert [c.name for c in session.calls] == ["set_audio_muted", "set_video_muted"]

    def test_empty_command_does_not_fail_frame(self, session):
        stats = Dispatcher().pump(session, [chat_frame("++   ")])
        assert stats.handled == 1
        assert stats.failed == 0
        assert session.calls == []

    def test_send_failure_does_not_fail_frame(self):
        from zoomer.session import RecordingSession
        session = RecordingSession(BOT_ID, fail_destinations=[EVERYONE_CHAT_ID])
        stats = Dispatcher().pump(session, [roster_frame((1, "A"), (2, "B")), chat_frame("++mute")])
        assert stats.failed == 0
        assert stats.handled == 2
        assert len(session.calls) == 4

    def test_decoded_body_identical_across_runs(self):
        frame = roster_frame((1, "A"))
        a = envelope_module.decode_payload(parse_envelope(frame))
        b = envelope_module.decode_payload(parse_envelope(json.dumps(frame)))
        assert a == b
