"""
Envelope classification and payload decoding.

parse_envelope() turns an inbound frame into an Envelope, is_interesting()
drops keepalives, decode_payload() produces the typed body for the kinds the
bot reacts to.
"""

import json
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from zoomer.errors import DecodeError
from zoomer.models.chat import ChatIndication
from zoomer.models.envelope import Envelope
from zoomer.models.events import EventKind
from zoomer.models.roster import RosterIndication
from zoomer.models.wire import WireModel

Body = Union[RosterIndication, ChatIndication]

BODY_TYPES: dict[int, type[WireModel]] = {
    EventKind.WS_CONF_ROSTER_INDICATION: RosterIndication,
    EventKind.WS_CONF_CHAT_INDICATION: ChatIndication,
}


def parse_envelope(raw: Union[Envelope, Mapping[str, Any], str, bytes]) -> Envelope:
    """Parse an inbound frame. Raises DecodeError if it is not an envelope."""
    if isinstance(raw, Envelope):
        return raw
    try:
        if isinstance(raw, (str, bytes)):
            return Envelope.model_validate_json(raw)
        return Envelope.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(f"Malformed envelope: {e.error_count()} validation error(s)", payload=raw) from e


def is_interesting(envelope: Envelope) -> bool:
    return envelope.kind != EventKind.WS_CONN_KEEPALIVE


def decode_payload(envelope: Envelope) -> Optional[Body]:
    """Decode the envelope body into the typed variant for its kind.

    Returns None for known events the bot does not act on (join response,
    attribute changes, ...). Unknown event codes raise DecodeError.
    """
    body_type = BODY_TYPES.get(envelope.kind)
    if body_type is None:
        if EventKind.is_known(envelope.kind):
            return None
        raise DecodeError(
            f"Unknown event {EventKind.name_of(envelope.kind)}",
            kind=envelope.kind, payload=envelope.payload,
        )

    payload = envelope.payload
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise DecodeError(
                f"Body of {EventKind.name_of(envelope.kind)} is not JSON: {e}",
                kind=envelope.kind, payload=envelope.payload,
            ) from e
    if not isinstance(payload, Mapping):
        raise DecodeError(
            f"Body of {EventKind.name_of(envelope.kind)} must be an object, got {type(payload).__name__}",
            kind=envelope.kind, payload=envelope.payload,
        )

    try:
        return body_type.from_wire(payload)
    except ValidationError as e:
        raise DecodeError(
            f"Body does not match {body_type.__name__}: {e.error_count()} validation error(s)",
            kind=envelope.kind, payload=envelope.payload,
        ) from e
