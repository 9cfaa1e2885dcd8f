"""Trigger text matching for inbound WhatsApp messages."""

import logging
import re

from app.persistence.models.whatsapp_trigger import MatchType

logger = logging.getLogger(__name__)


def matches(message_text: str, trigger_text: str, match_type: str) -> bool:
    """Check whether a message satisfies one trigger.

    Literal modes compare lower-cased operands. ``regex`` compiles the trigger
    text with IGNORECASE and searches the message as received.

    Args:
        message_text: Inbound message text
        trigger_text: Trigger text (a pattern when match_type is regex)
        match_type: One of MatchType

    Returns:
        True if the message matches; False otherwise, including for
        invalid patterns and unknown match types
    """
    if match_type == MatchType.REGEX:
        try:
            pattern = re.compile(trigger_text, re.IGNORECASE)
        except re.error as e:
            logger.warning(f"Invalid trigger regex {trigger_text!r}: {e}")
            return False
        return pattern.search(message_text) is not None

    text = message_text.lower()
    trigger = trigger_text.lower()

    if match_type == MatchType.EXACT:
        return text == trigger
    if match_type == MatchType.CONTAINS:
        return trigger in text
    if match_type == MatchType.STARTS_WITH:
        return text.startswith(trigger)
    return False
