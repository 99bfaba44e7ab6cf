"""
zoomer — meeting bot core.

Decodes meeting websocket envelopes, welcomes new participants and runs
``++`` chat commands against a Session.
"""

__version__ = "0.1.0"

from zoomer.errors import ZoomerError, DecodeError, EmptyCommandError, SessionError, ConfigError
from zoomer.models.events import EventKind
from zoomer.models.envelope import Envelope
from zoomer.models.chat import ChatIndication, EVERYONE_CHAT_ID
from zoomer.models.roster import RosterIndication, ParticipantAdded
from zoomer.session import Session, RecordingSession
from zoomer.commands import Command, CommandInterpreter, parse_command
from zoomer.dispatch import Dispatcher, DispatchStats
from zoomer.config import BotConfig, load_config

__all__ = [
    "ZoomerError",
    "DecodeError",
    "EmptyCommandError",
    "SessionError",
    "ConfigError",
    "EventKind",
    "Envelope",
    "ChatIndication",
    "EVERYONE_CHAT_ID",
    "RosterIndication",
    "ParticipantAdded",
    "Session",
    "RecordingSession",
    "Command",
    "CommandInterpreter",
    "parse_command",
    "Dispatcher",
    "DispatchStats",
    "BotConfig",
    "load_config",
]
