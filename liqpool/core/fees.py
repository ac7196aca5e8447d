"""
Linear unstake fee curve (deterministic, integer-only).

The fee is evaluated at the liquidity left in the pool AFTER the swap:

    liq_after = token - st_token_amount
    fee = max_fee                                        if st_token_amount > token
    fee = min_fee                                        if liq_after >= liq_target
    fee = max_fee - (max_fee - min_fee) * liq_after / liq_target   otherwise

The interpolation term rounds down, so the fee rounds up toward ``max_fee``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .calc import U64_MAX, proportion, require_u64
from .errors import InvalidPoolConfig


@dataclass(frozen=True)
class FeeCurve:
    max_fee: int
    min_fee: int
    liq_target: int

    def __post_init__(self) -> None:
        for name, v in (
            ("max_fee", self.max_fee),
            ("min_fee", self.min_fee),
            ("liq_target", self.liq_target),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0 or v > U64_MAX:
                raise InvalidPoolConfig(f"{name} out of u64 range: {v}")
        if self.max_fee < self.min_fee:
            raise InvalidPoolConfig(
                f"max fee cannot be smaller than min fee: {self.max_fee} < {self.min_fee}"
            )


def linear_fee(curve: FeeCurve, token: int, st_token_amount: int) -> int:
    """Fee fraction (UNIT-scaled) for swapping ``st_token_amount`` against ``token`` liquidity."""
    require_u64("token", token)
    require_u64("st_token_amount", st_token_amount)

    if st_token_amount > token:
        return curve.max_fee

    liq_after = token - st_token_amount
    if liq_after >= curve.liq_target:
        return curve.min_fee

    return curve.max_fee - proportion(curve.max_fee - curve.min_fee, liq_after, curve.liq_target)
