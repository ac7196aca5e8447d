"""Exception types for the unstake liquidity pool.

Every pool error derives from ``LiqPoolError`` and carries a stable ``code``
that ``step()`` in ``step.py`` reports for callers that prefer
``PoolStepResult`` inspection over exceptions.
"""

from __future__ import annotations


class LiqPoolError(Exception):
    """Base class for errors raised by pool operations."""

    code: str = "LIQ_POOL_ERROR"


class CalculationError(LiqPoolError):
    """Raised when an arithmetic result does not fit the u64 domain."""

    code = "CALCULATION_ERROR"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = "Program tried to do erroneous calculation"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidInputData(LiqPoolError):
    """Raised when a caller supplies a value that is impossible for the current state."""

    code = "INVALID_INPUT_DATA"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"A logically impossible input value: {reason}")


class InsufficientLiquidity(LiqPoolError):
    """Raised when the pool holds too little base token to pay out a swap."""

    code = "INSUFFICIENT_LIQUIDITY"

    def __init__(self) -> None:
        super().__init__("Liquidity of the pool was too small to execute operation")


class InvalidPoolConfig(LiqPoolError, ValueError):
    """Raised when pool parameters are incoherent (e.g. ``max_fee < min_fee``)."""

    code = "INVALID_POOL_CONFIG"
