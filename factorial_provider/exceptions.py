"""Exceptions raised by the factorial provider."""

from typing import Any, Optional

from .constants import MessageKey, get_message


class ArgumentOutOfRangeError(ValueError):
    """Raised when an argument lies outside the domain of the function.

    Attributes:
        param_name (str): Name of the offending parameter.
        value: The rejected value.
    """

    def __init__(self, param_name: str, value: Any, message: Optional[str] = None):
        self.param_name = param_name
        self.value = value
        self.message = message or get_message(MessageKey.ARGUMENT_POSITIVE)
        super().__init__(f"{self.message} (Parameter '{param_name}', actual value {value!r})")
