"""Constants and message table for the factorial provider."""

from enum import Enum

# Largest x for which x! is finite as a float64.
FACTORIAL_MAX_ARGUMENT = 170


class MessageKey(str, Enum):
    """Identifiers of the user-facing messages."""

    ARGUMENT_POSITIVE = "ArgumentPositive"
    ARGUMENT_INTEGER = "ArgumentInteger"


MESSAGES = {
    MessageKey.ARGUMENT_POSITIVE: "Value must not be negative.",
    MessageKey.ARGUMENT_INTEGER: "Value must be an integer.",
}


def get_message(key: MessageKey) -> str:
    """Return the message text registered for ``key``."""
    return MESSAGES[MessageKey(key)]


def set_message(key: MessageKey, text: str) -> None:
    """Override the message text registered for ``key``.

    Args:
        key: Message identifier, either a ``MessageKey`` or its string value.
        text: New message text.

    Raises:
        ValueError: If ``key`` is not a known identifier.
    """
    MESSAGES[MessageKey(key)] = text
