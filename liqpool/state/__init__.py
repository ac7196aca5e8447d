"""
State snapshots for unstake liquidity pools
"""

from .pool_state import (
    STATE_VAR_NAMES,
    PoolState,
    initial_state,
    state_from_dict,
    state_to_dict,
)

__all__ = [
    "STATE_VAR_NAMES",
    "PoolState",
    "initial_state",
    "state_from_dict",
    "state_to_dict",
]
