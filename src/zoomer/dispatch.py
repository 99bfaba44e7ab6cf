"""
Envelope dispatch — classifier -> decoder -> roster/command handlers.

on_envelope() is the per-frame callback a Session invokes. Decode failures
are raised to the caller; every other failure is absorbed by the handlers.
pump() is the sequential loop used when frames come from a file or a queue.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from zoomer.commands import CommandInterpreter
from zoomer.config import BotConfig
from zoomer.errors import DecodeError
from zoomer.models.chat import ChatIndication
from zoomer.models.envelope import Envelope
from zoomer.models.events import EventKind
from zoomer.models.roster import RosterIndication
from zoomer.roster import welcome_participants
from zoomer.session import Session
from zoomer.transport.envelope import decode_payload, is_interesting, parse_envelope

logger = logging.getLogger(__name__)

Frame = Union[Envelope, Mapping[str, Any], str, bytes]


class DispatchStats:
    __slots__ = ("received", "ignored", "handled", "failed")

    def __init__(self) -> None:
        self.received = 0
        self.ignored = 0
        self.handled = 0
        self.failed = 0

    def as_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in self.__slots__}

    def __repr__(self) -> str:
        return f"DispatchStats({self.as_dict()})"


class Dispatcher:
    def __init__(self, config: Optional[BotConfig] = None):
        self._config = config or BotConfig()
        self._interpreter = CommandInterpreter(prefix=self._config.prefix)

    def on_envelope(self, session: Session, envelope: Envelope) -> bool:
        """Process one envelope. Returns False if it was ignored (keepalive or
        a known event the bot does not act on).

        Raises DecodeError when the envelope cannot be decoded.
        """
        if not is_interesting(envelope):
            return False

        body = decode_payload(envelope)
        if body is None:
            logger.debug(f"Ignoring {EventKind.name_of(envelope.kind)} seq={envelope.seq}")
            return False
        logger.debug(f"{EventKind.name_of(envelope.kind)} seq={envelope.seq}: {body!r}")

        if isinstance(body, RosterIndication):
            welcome_participants(session, body)
        elif isinstance(body, ChatIndication):
            self._interpreter.handle(session, body)
        return True

    def pump(self, session: Session, frames: Iterable[Frame]) -> DispatchStats:
        """Dispatch frames one at a time, logging decode failures and carrying on.

        With ``stop_on_decode_error`` configured the first DecodeError is re-raised.
        """
        stats = DispatchStats()
        for frame in frames:
            stats.received += 1
            try:
                envelope = parse_envelope(frame)
                if self.on_envelope(session, envelope):
                    stats.handled += 1
                else:
                    stats.ignored += 1
            except DecodeError as e:
                stats.failed += 1
                logger.warning(f"Frame {stats.received}: {e}")
                if self._config.stop_on_decode_error:
                    raise
        return stats
