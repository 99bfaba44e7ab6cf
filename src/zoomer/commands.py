"""
Chat command interpreter.

Commands look like ``++verb arg1 arg2``. Recognized verbs change the bot's
own presence through the Session; anything else is echoed back to whoever
sent it.

    ++rename New Name       rename the bot
    ++mute [on|off]         mute/unmute audio and video together
    ++screenshare [on|off]  enable/disable screen sharing
    ++chatlevel N           set the meeting chat permission level
"""

import logging
import re
from typing import Callable, Optional

from zoomer.errors import EmptyCommandError
from zoomer.models.chat import ChatIndication
from zoomer.session import Session

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "++"
ECHO_TEMPLATE = "I don't understand this message so I am echoing it: {text}"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1


class Command:
    __slots__ = ("verb", "args")

    def __init__(self, verb: str, args: Optional[list[str]] = None):
        self.verb = verb
        self.args = args or []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.verb == other.verb and self.args == other.args

    def __repr__(self) -> str:
        return f"Command(verb={self.verb!r}, args={self.args!r})"


def parse_command(text: str, prefix: str = DEFAULT_PREFIX) -> Optional[Command]:
    """Split chat text into a Command.

    Returns None when the text is not addressed to the bot. Raises
    EmptyCommandError when the prefix is followed by nothing but whitespace.
    """
    if not text.startswith(prefix):
        return None
    words = text[len(prefix):].split()
    if not words:
        raise EmptyCommandError()
    return Command(words[0], words[1:])


def parse_chat_level(value: str) -> Optional[int]:
    if not _INTEGER.fullmatch(value):
        return None
    level = int(value)
    if not _INT64_MIN <= level <= _INT64_MAX:
        return None
    return level


class CommandInterpreter:
    def __init__(self, prefix: str = DEFAULT_PREFIX):
        self._prefix = prefix
        self._handlers: dict[str, Callable[[Session, list[str]], None]] = {
            "rename": self._rename,
            "mute": self._mute,
            "screenshare": self._screenshare,
            "chatlevel": self._chatlevel,
        }

    @property
    def verbs(self) -> list[str]:
        return list(self._handlers)

    def handle(self, session: Session, chat: ChatIndication) -> Optional[Command]:
        """Run the command in a chat message, if there is one. Never raises."""
        try:
            command = parse_command(chat.text, self._prefix)
        except EmptyCommandError as e:
            logger.warning(f"Ignoring chat {chat.msg_id or ''}: {e}")
            return None
        if command is None:
            return None

        handler = self._handlers.get(command.verb)
        if handler is None:
            self._echo(session, chat)
        else:
            handler(session, command.args)
        return command

    def _rename(self, session: Session, args: list[str]) -> None:
        if args:
            session.rename_me(" ".join(args))

    def _mute(self, session: Session, args: list[str]) -> None:
        if not args or args[0] == "on":
            session.set_audio_muted(True)
            session.set_video_muted(True)
        elif args[0] == "off":
            session.set_audio_muted(False)
            session.set_video_muted(False)

    def _screenshare(self, session: Session, args: list[str]) -> None:
        if not args or args[0] == "on":
            session.set_screen_share_muted(False)
        elif args[0] == "off":
            session.set_screen_share_muted(True)

    def _chatlevel(self, session: Session, args: list[str]) -> None:
        if not args:
            return
        level = parse_chat_level(args[0])
        if level is None:
            logger.debug(f"Dropping non-numeric chat level {args[0]!r}")
            return
        session.set_chat_level(level)

    def _echo(self, session: Session, chat: ChatIndication) -> None:
        try:
            session.send_chat_message(chat.dest_node_id, ECHO_TEMPLATE.format(text=chat.text))
        except Exception as e:
            logger.error(f"Echo reply to {chat.dest_node_id} failed: {e}")
