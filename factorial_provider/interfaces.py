"""
Factorial Provider Interfaces

Contracts for the factorial provider and for its log-gamma collaborator.
"""

from abc import ABC, abstractmethod
from typing import Protocol


class IGammaLn(Protocol):
    """Callable computing ln(Gamma(z))."""

    def __call__(self, z: float) -> float:
        ...


class IFactorialProvider(ABC):
    """
    Abstract interface for factorial computation in double precision.

    Implementations return ``float`` values and must reject negative or
    non-integer arguments instead of producing a sentinel value.
    """

    @abstractmethod
    def factorial(self, x: int) -> float:
        """
        Compute x! as a float.

        Args:
            x (int): A non-negative integer.

        Returns:
            float: x!, or positive infinity when x! exceeds the float64 range.

        Raises:
            ArgumentOutOfRangeError: If x is negative.
            TypeError: If x is not an integer.
        """
        pass

    @abstractmethod
    def factorial_ln(self, x: int) -> float:
        """
        Compute ln(x!) as a float.

        Args:
            x (int): A non-negative integer.

        Returns:
            float: The natural logarithm of x!.

        Raises:
            ArgumentOutOfRangeError: If x is negative.
            TypeError: If x is not an integer.
        """
        pass
