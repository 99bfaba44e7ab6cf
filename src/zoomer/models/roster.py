"""
Roster indication models (WS_CONF_ROSTER_INDICATION body).
"""

from typing import Optional

from zoomer.models.wire import WireModel


class ParticipantAdded(WireModel):
    wire_text_fields = {"dn2": "display_name"}

    id: int
    display_name: str
    role: Optional[int] = None
    muted: Optional[bool] = None


class ParticipantRemoved(WireModel):
    id: int


class ParticipantUpdated(WireModel):
    wire_text_fields = {"dn2": "display_name"}

    id: int
    display_name: Optional[str] = None
    muted: Optional[bool] = None


class RosterIndication(WireModel):
    """Participants added to, removed from or changed in the meeting, in wire order."""
    add: list[ParticipantAdded] = []
    remove: list[ParticipantRemoved] = []
    update: list[ParticipantUpdated] = []
