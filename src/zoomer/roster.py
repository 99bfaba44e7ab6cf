"""
Roster reactions: welcome everyone who joins, except the bot itself.
"""

import logging

from zoomer.models.chat import EVERYONE_CHAT_ID
from zoomer.models.roster import RosterIndication
from zoomer.session import Session

logger = logging.getLogger(__name__)

WELCOME_TEMPLATE = "Welcome to the meeting, {name}!"


def welcome_message(display_name: str) -> str:
    return WELCOME_TEMPLATE.format(name=display_name)


def welcome_participants(session: Session, roster: RosterIndication) -> int:
    """Broadcast one welcome per added participant, in roster order.

    A failed send is logged and does not stop the remaining welcomes.
    Returns the number of welcomes that were sent successfully.
    """
    self_id = session.self_user_id
    sent = 0
    for person in roster.add:
        if person.id == self_id:
            continue
        try:
            session.send_chat_message(EVERYONE_CHAT_ID, welcome_message(person.display_name))
        except Exception as e:
            logger.error(f"Welcome for participant {person.id} failed: {e}")
            continue
        sent += 1
    return sent
