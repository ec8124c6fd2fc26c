from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from .constants import FACTORIAL_MAX_ARGUMENT


class FactorialRequest(BaseModel):
    """Request model for the factorial endpoints.

    Attributes:
        n (int): Argument of the factorial. Floats and booleans are rejected.
    """
    n: StrictInt = Field(..., description="Argument of the factorial, must be a non-negative integer")


class FactorialResponse(BaseModel):
    """Response model for the factorial endpoints.

    JSON has no infinity, so an overflowed factorial is reported with
    ``value = None`` and ``is_infinite = True``.

    Attributes:
        n (int): Argument the value was computed for.
        function (str): ``"factorial"`` or ``"factorial_ln"``.
        value (Optional[float]): Result, or None when infinite.
        is_infinite (bool): Whether the result is positive infinity.
    """
    n: int = Field(..., description="Argument of the factorial")
    function: str = Field(..., description="Computed function")
    value: Optional[float] = Field(None, description="Result, null when it overflows to infinity")
    is_infinite: bool = Field(False, description="True when the result is positive infinity")


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""
    status: str = "ok"
    cache_built: bool
    max_cached_argument: int = FACTORIAL_MAX_ARGUMENT
