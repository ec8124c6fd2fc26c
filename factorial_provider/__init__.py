"""
Factorial Provider Module

Double-precision factorial and log-factorial of non-negative integers,
backed by a lazily built table of 0! through 170! and a log-gamma fallback.
"""

from .constants import FACTORIAL_MAX_ARGUMENT, MessageKey, get_message, set_message
from .exceptions import ArgumentOutOfRangeError
from .factorial_provider import (
    FactorialProvider,
    factorial,
    factorial_ln,
    generate_factorials,
)
from .gamma import gamma_ln
from .interfaces import IFactorialProvider, IGammaLn

__all__ = [
    "FACTORIAL_MAX_ARGUMENT",
    "MessageKey",
    "get_message",
    "set_message",
    "ArgumentOutOfRangeError",
    "FactorialProvider",
    "factorial",
    "factorial_ln",
    "generate_factorials",
    "gamma_ln",
    "IFactorialProvider",
    "IGammaLn",
]
