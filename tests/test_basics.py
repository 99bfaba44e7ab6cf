"""Basic unit tests for the zoomer package."""

from zoomer import (
    ConfigError,
    DecodeError,
    Dispatcher,
    EmptyCommandError,
    EventKind,
    EVERYONE_CHAT_ID,
    SessionError,
    ZoomerError,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert Dispatcher is not None


def test_error_hierarchy():
    for cls in (DecodeError, EmptyCommandError, SessionError, ConfigError):
        assert issubclass(cls, ZoomerError)


def test_error_attributes():
    err = ZoomerError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    decode = DecodeError("bad body", kind=7937, payload={"x": 1})
    assert decode.code == "decode_error"
    assert decode.kind == 7937
    assert decode.payload == {"x": 1}

    assert EmptyCommandError().code == "empty_command"
    assert str(EmptyCommandError()) == "No command provided after prefix"

    send = SessionError("send failed", details={"destination": 5})
    assert send.code == "session_error"
    assert send.details == {"destination": 5}


def test_event_constants():
    assert EventKind.WS_CONN_KEEPALIVE == 0
    assert EventKind.name_of(EventKind.WS_CONF_CHAT_INDICATION) == "WS_CONF_CHAT_INDICATION"
    assert EventKind.name_of(123456) == "UNKNOWN(123456)"
    assert EventKind.is_known(EventKind.WS_CONF_JOIN_RES)
    assert not EventKind.is_known(123456)
    assert EVERYONE_CHAT_ID == 0
