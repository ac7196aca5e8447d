"""
Core pool algorithms
"""

from .calc import UNIT, U64_MAX, apply_fee, proportion, shares, value
from .errors import (
    CalculationError,
    InsufficientLiquidity,
    InvalidInputData,
    InvalidPoolConfig,
    LiqPoolError,
)
from .fees import FeeCurve, linear_fee
from .liq_pool import CreatePoolResult, LiqPool, SwapQuote, create_pool
from .step import InvalidCommand, PoolCommand, PoolStepResult, step, step_or_raise

__all__ = [
    "UNIT",
    "U64_MAX",
    "apply_fee",
    "proportion",
    "shares",
    "value",
    "CalculationError",
    "InsufficientLiquidity",
    "InvalidInputData",
    "InvalidPoolConfig",
    "LiqPoolError",
    "FeeCurve",
    "linear_fee",
    "CreatePoolResult",
    "LiqPool",
    "SwapQuote",
    "create_pool",
    "InvalidCommand",
    "PoolCommand",
    "PoolStepResult",
    "step",
    "step_or_raise",
]
