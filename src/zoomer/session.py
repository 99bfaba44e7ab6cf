"""
Session collaborator.

The Session owns the meeting connection and all presence state. The bot only
issues one-way intents against it; it never reads mute or name state back.
"""

import logging
from typing import Any, Iterable, Optional, Protocol

from zoomer.errors import SessionError

logger = logging.getLogger(__name__)


class Session(Protocol):
    @property
    def self_user_id(self) -> int: ...

    def send_chat_message(self, destination: int, text: str) -> None:
        """Send chat text to a participant id or EVERYONE_CHAT_ID. Raises on failure."""
        ...

    def rename_me(self, new_name: str) -> None: ...

    def set_audio_muted(self, muted: bool) -> None: ...

    def set_video_muted(self, muted: bool) -> None: ...

    def set_screen_share_muted(self, muted: bool) -> None: ...

    def set_chat_level(self, level: int) -> None: ...


class SessionCall:
    __slots__ = ("name", "args")

    def __init__(self, name: str, *args: Any):
        self.name = name
        self.args = args

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SessionCall):
            return NotImplemented
        return self.name == other.name and self.args == other.args

    def __repr__(self) -> str:
        return f"SessionCall({self.name!r}, {', '.join(repr(a) for a in self.args)})"


class RecordingSession:
    """In-memory Session that records intents instead of sending them.

    Chat sends to any destination in ``fail_destinations`` raise SessionError
    (after being recorded), which lets callers exercise send-failure paths.
    """

    def __init__(self, self_user_id: int, fail_destinations: Optional[Iterable[int]] = None):
        self._self_user_id = self_user_id
        self._fail_destinations = set(fail_destinations or ())
        self.calls: list[SessionCall] = []

    @property
    def self_user_id(self) -> int:
        return self._self_user_id

    def _record(self, name: str, *args: Any) -> None:
        logger.debug(f"session intent {name}{args!r}")
        self.calls.append(SessionCall(name, *args))

    def send_chat_message(self, destination: int, text: str) -> None:
        self._record("send_chat_message", destination, text)
        if destination in self._fail_destinations:
            raise SessionError(f"Chat send to {destination} failed", details={"destination": destination})

    def rename_me(self, new_name: str) -> None:
        self._record("rename_me", new_name)

    def set_audio_muted(self, muted: bool) -> None:
        self._record("set_audio_muted", muted)

    def set_video_muted(self, muted: bool) -> None:
        self._record("set_video_muted", muted)

    def set_screen_share_muted(self, muted: bool) -> None:
        self._record("set_screen_share_muted", muted)

    def set_chat_level(self, level: int) -> None:
        self._record("set_chat_level", level)
