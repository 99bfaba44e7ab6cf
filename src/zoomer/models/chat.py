"""
Chat indication model (WS_CONF_CHAT_INDICATION body).
"""

from typing import Optional

from pydantic import Field

from zoomer.models.wire import WireModel

# Destination meaning "all participants"; never a real participant id.
EVERYONE_CHAT_ID = 0


class ChatIndication(WireModel):
    wire_text_fields = {"text": "text", "senderName": "sender_name"}

    text: str
    dest_node_id: int = Field(alias="destNodeID")
    sender_id: Optional[int] = Field(default=None, alias="attendeeNodeID")
    sender_name: Optional[str] = None
    msg_id: Optional[str] = Field(default=None, alias="msgID")
