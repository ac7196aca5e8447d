"""State snapshots and serialization for unstake liquidity pools.

`initial_state()` returns a freshly configured pool snapshot with zero balances.

Round-trip property (tested): `state_from_dict(state_to_dict(s)) == s` for all valid states.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.calc import U64_MAX
from ..core.errors import InvalidPoolConfig


@dataclass(frozen=True)
class PoolState:
    """Immutable snapshot of a pool: fee parameters and balances."""

    # Fee parameters (UNIT-scaled fractions) and liquidity target
    max_fee: int
    min_fee: int
    liq_target: int

    # Balances
    token: int = 0
    st_token: int = 0
    lp_token_supply: int = 0

    def __post_init__(self) -> None:
        for name in STATE_VAR_NAMES:
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0 or v > U64_MAX:
                raise InvalidPoolConfig(f"{name} out of u64 range: {v}")
        if self.max_fee < self.min_fee:
            raise InvalidPoolConfig(
                f"max fee cannot be smaller than min fee: {self.max_fee} < {self.min_fee}"
            )


# Auto-derived from PoolState field definitions (single source of truth).
STATE_VAR_NAMES: tuple[str, ...] = tuple(PoolState.__dataclass_fields__)


def initial_state(max_fee: int, min_fee: int, liq_target: int) -> PoolState:
    """Return a pool snapshot with the given parameters and nothing deposited."""
    return PoolState(max_fee=max_fee, min_fee=min_fee, liq_target=liq_target)


def state_to_dict(state: PoolState) -> dict[str, int]:
    """Serialize a PoolState to a plain dict."""
    return {name: getattr(state, name) for name in STATE_VAR_NAMES}


def state_from_dict(d: Mapping[str, Any]) -> PoolState:
    """Deserialize a dict to a PoolState. Raises KeyError on missing fields."""
    kwargs: dict[str, int] = {}
    for name in STATE_VAR_NAMES:
        val = d[name]
        if isinstance(val, bool) or not isinstance(val, int):
            raise TypeError(f"state var {name!r} must be int, got {type(val).__name__}")
        kwargs[name] = int(val)
    return PoolState(**kwargs)
