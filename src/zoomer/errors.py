"""
Zoomer error types.
"""

from typing import Any, Optional


class ZoomerError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class DecodeError(ZoomerError):
    """Envelope kind is unrecognized or its payload does not match the kind's shape."""

    def __init__(self, message: str, kind: Optional[int] = None, payload: Any = None):
        super().__init__("decode_error", message, {"kind": kind})
        self.kind = kind
        self.payload = payload


class EmptyCommandError(ZoomerError):
    def __init__(self, message: str = "No command provided after prefix"):
        super().__init__("empty_command", message)


class SessionError(ZoomerError):
    def __init__(self, message: str, code: str = "session_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class ConfigError(ZoomerError):
    def __init__(self, message: str):
        super().__init__("config_error", message)
