"""
Factorial Provider Implementation

Computes x! and ln(x!) in double precision. Values up to 170! are served from
a process-wide table built once on first use; larger arguments overflow to
positive infinity for ``factorial`` and fall back to log-gamma for
``factorial_ln``.
"""

import logging
import math
import threading
from typing import Optional

import numpy as np

from .constants import FACTORIAL_MAX_ARGUMENT, MessageKey, get_message
from .exceptions import ArgumentOutOfRangeError
from .gamma import gamma_ln
from .interfaces import IFactorialProvider, IGammaLn

logger = logging.getLogger(__name__)


def _check_argument(x, param_name: str = "x") -> int:
    # bool is an int subclass but never a meaningful factorial argument
    if isinstance(x, bool) or not isinstance(x, (int, np.integer)):
        raise TypeError(f"{get_message(MessageKey.ARGUMENT_INTEGER)} Got {type(x).__name__}")
    x = int(x)
    if x < 0:
        raise ArgumentOutOfRangeError(param_name, x)
    return x


def generate_factorials(max_argument: int) -> np.ndarray:
    """
    Build the table of factorials 0!, 1!, ..., max_argument!.

    Each entry is computed from the previous one, so the whole table costs
    O(max_argument) multiplications and is identical on every run.

    Args:
        max_argument (int): Largest argument to tabulate.

    Returns:
        np.ndarray: Read-only float64 array of length max_argument + 1.

    Raises:
        ArgumentOutOfRangeError: If max_argument is negative.
        TypeError: If max_argument is not an integer.
    """
    max_argument = _check_argument(max_argument, "max_argument")
    cache = np.empty(max_argument + 1, dtype=np.float64)
    cache[0] = 1.0
    for i in range(1, max_argument + 1):
        cache[i] = cache[i - 1] * i
    cache.flags.writeable = False
    return cache


class FactorialProvider(IFactorialProvider):
    """
    Factorial and log-factorial of non-negative integers as floats.

    The factorial table is shared by all instances. It is published only
    once fully built, so concurrent first callers either wait on the lock
    or see the finished read-only array.
    """

    _cache: Optional[np.ndarray] = None
    _lock = threading.Lock()

    def __init__(self, gamma_ln: IGammaLn = gamma_ln):
        """
        Args:
            gamma_ln: Log-gamma function used by ``factorial_ln`` beyond 170.
        """
        self._gamma_ln = gamma_ln

    @classmethod
    def factorial_cache(cls) -> np.ndarray:
        """Return the shared factorial table, building it on first use."""
        cache = cls._cache
        if cache is None:
            with cls._lock:
                cache = cls._cache
                if cache is None:
                    cache = generate_factorials(FACTORIAL_MAX_ARGUMENT)
                    cls._cache = cache
                    logger.debug("Built factorial cache for 0..%d", FACTORIAL_MAX_ARGUMENT)
        return cache

    @classmethod
    def is_cache_built(cls) -> bool:
        return cls._cache is not None

    @classmethod
    def warm_up(cls) -> None:
        """Build the factorial table now instead of on first request."""
        cls.factorial_cache()

    def factorial(self, x: int) -> float:
        """
        Compute x! as a float.

        Every x up to 22 is exact, every x up to 170 is finite. Larger values
        overflow to positive infinity rather than raising, so callers can keep
        doing IEEE arithmetic with the result.

        If you need to multiply or divide several factorials, use
        ``factorial_ln`` and add or subtract instead.

        Args:
            x (int): A non-negative integer.

        Returns:
            float: x!, or ``inf`` for x > 170.

        Raises:
            ArgumentOutOfRangeError: If x is negative.
            TypeError: If x is not an integer.

        Examples:
            >>> FactorialProvider().factorial(5)
            120.0
            >>> FactorialProvider().factorial(171)
            inf
        """
        x = _check_argument(x)
        if x <= FACTORIAL_MAX_ARGUMENT:
            return float(self.factorial_cache()[x])
        return math.inf

    def factorial_ln(self, x: int) -> float:
        """
        Compute ln(x!) as a float.

        Args:
            x (int): A non-negative integer.

        Returns:
            float: ln(x!). For x > 170 this is ln(Gamma(x + 1)), and ``inf``
            once x itself no longer fits in a float.

        Raises:
            ArgumentOutOfRangeError: If x is negative.
            TypeError: If x is not an integer.
        """
        x = _check_argument(x)
        if x <= 1:
            return 0.0
        if x <= FACTORIAL_MAX_ARGUMENT:
            return float(np.log(self.factorial_cache()[x]))
        try:
            z = x + 1.0
        except OverflowError:
            # x itself exceeds the float64 range, so ln(x!) does too
            return math.inf
        return self._gamma_ln(z)


_default_provider = FactorialProvider()


def factorial(x: int) -> float:
    """Compute x! with the shared default provider."""
    return _default_provider.factorial(x)


def factorial_ln(x: int) -> float:
    """Compute ln(x!) with the shared default provider."""
    return _default_provider.factorial_ln(x)
