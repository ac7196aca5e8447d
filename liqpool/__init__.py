"""
liqpool: mathematical model of an unstake liquidity pool with a linear swap fee.

A pool holds base token and staked token. Liquidity providers deposit base
token for LP tokens; stakers swap staked token for base token immediately,
paying a fee that interpolates linearly between ``max_fee`` and ``min_fee``
as post-swap liquidity approaches ``liq_target``.
"""

from .core import (
    UNIT,
    U64_MAX,
    CalculationError,
    CreatePoolResult,
    FeeCurve,
    InsufficientLiquidity,
    InvalidInputData,
    InvalidPoolConfig,
    LiqPool,
    LiqPoolError,
    PoolCommand,
    PoolStepResult,
    SwapQuote,
    apply_fee,
    create_pool,
    proportion,
    shares,
    step,
    step_or_raise,
    value,
)
from .state import PoolState, state_from_dict, state_to_dict
from .config import PoolConfig, load_pool_config, pool_config_from_mapping

__all__ = [
    "UNIT",
    "U64_MAX",
    "CalculationError",
    "CreatePoolResult",
    "FeeCurve",
    "InsufficientLiquidity",
    "InvalidInputData",
    "InvalidPoolConfig",
    "LiqPool",
    "LiqPoolError",
    "PoolCommand",
    "PoolStepResult",
    "SwapQuote",
    "apply_fee",
    "create_pool",
    "proportion",
    "shares",
    "step",
    "step_or_raise",
    "value",
    "PoolState",
    "state_from_dict",
    "state_to_dict",
    "PoolConfig",
    "load_pool_config",
    "pool_config_from_mapping",
]
