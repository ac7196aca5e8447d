"""
Mathematical model of an unstake liquidity pool with a linear swap fee.

The pool holds a base token and a staked token. Liquidity providers deposit
base token and receive LP tokens; stakers may swap staked token for base
token immediately, paying a fee that depends on the liquidity left after
the swap (see ``fees.py``).

Every operation computes all new balances before assigning any of them, so
a raised error leaves the pool untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..state.pool_state import PoolState
from .calc import apply_fee, checked_add, checked_sub, proportion, require_u64, shares
from .errors import InsufficientLiquidity, InvalidInputData, InvalidPoolConfig
from .fees import FeeCurve, linear_fee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwapQuote:
    fee: int
    token_out: int


@dataclass(frozen=True)
class CreatePoolResult:
    ok: bool
    pool: Optional["LiqPool"] = None
    error: Optional[str] = None


class LiqPool:
    """
    Unstake liquidity pool.

    Notes:
    - Balances are u64 amounts; fees are UNIT-scaled fractions.
    - ``max_fee >= min_fee`` is checked once, at construction.
    - Not thread-safe: callers serialize access.
    """

    def __init__(self, max_fee: int, min_fee: int, liq_target: int) -> None:
        self._curve = FeeCurve(max_fee=max_fee, min_fee=min_fee, liq_target=liq_target)
        self._token = 0
        self._st_token = 0
        self._lp_token_supply = 0

    @classmethod
    def from_state(cls, state: PoolState) -> "LiqPool":
        """Rebuild a pool from a snapshot."""
        pool = cls(state.max_fee, state.min_fee, state.liq_target)
        pool._token = state.token
        pool._st_token = state.st_token
        pool._lp_token_supply = state.lp_token_supply
        return pool

    @property
    def max_fee(self) -> int:
        return self._curve.max_fee

    @property
    def min_fee(self) -> int:
        return self._curve.min_fee

    @property
    def liq_target(self) -> int:
        return self._curve.liq_target

    @property
    def fee_curve(self) -> FeeCurve:
        return self._curve

    @property
    def token(self) -> int:
        return self._token

    @property
    def st_token(self) -> int:
        return self._st_token

    @property
    def lp_token_supply(self) -> int:
        return self._lp_token_supply

    def snapshot(self) -> PoolState:
        return PoolState(
            max_fee=self.max_fee,
            min_fee=self.min_fee,
            liq_target=self.liq_target,
            token=self._token,
            st_token=self._st_token,
            lp_token_supply=self._lp_token_supply,
        )

    def add_liquidity(self, token_amount: int) -> int:
        """
        Put base token into the pool and return the LP tokens minted.

        LP tokens are minted in proportion to the deposit's share of the
        total pool value ``token + st_token`` (staked token valued 1:1).
        The first deposit mints 1:1.
        """
        require_u64("token_amount", token_amount)

        total_value = checked_add(self._token, self._st_token)
        if self._lp_token_supply > 0 and total_value == 0:
            raise InvalidInputData("pool has outstanding LP tokens but holds no value")

        lp_minted = shares(token_amount, total_value, self._lp_token_supply)
        new_token = checked_add(self._token, token_amount)
        new_supply = checked_add(self._lp_token_supply, lp_minted)

        self._token = new_token
        self._lp_token_supply = new_supply
        logger.debug("add_liquidity: token_amount=%d lp_minted=%d", token_amount, lp_minted)
        return lp_minted

    def remove_liquidity(self, lp_amount: int) -> Tuple[int, int]:
        """
        Burn LP tokens and return ``(token_amount, st_token_amount)``.

        Each asset is paid out in proportion to the burned share, rounded
        down independently.
        """
        require_u64("lp_amount", lp_amount)
        if lp_amount > self._lp_token_supply:
            logger.debug(
                "remove_liquidity rejected: lp_amount=%d > supply=%d",
                lp_amount,
                self._lp_token_supply,
            )
            raise InvalidInputData(
                "tried to remove more liquidity than it was possible with currently minted tokens"
            )
        if lp_amount == 0:
            return 0, 0

        token_amount = proportion(lp_amount, self._token, self._lp_token_supply)
        st_token_amount = proportion(lp_amount, self._st_token, self._lp_token_supply)
        new_supply = checked_sub(self._lp_token_supply, lp_amount)
        new_token = checked_sub(self._token, token_amount)
        new_st_token = checked_sub(self._st_token, st_token_amount)

        self._lp_token_supply = new_supply
        self._token = new_token
        self._st_token = new_st_token
        logger.debug(
            "remove_liquidity: lp_amount=%d token_out=%d st_token_out=%d",
            lp_amount,
            token_amount,
            st_token_amount,
        )
        return token_amount, st_token_amount

    def linear_fee(self, st_token_amount: int) -> int:
        """Fee fraction a swap of ``st_token_amount`` would pay right now."""
        return linear_fee(self._curve, self._token, st_token_amount)

    def quote_swap(self, st_token_amount: int) -> SwapQuote:
        """
        Compute what ``swap`` would pay without mutating the pool.

        Raises the same errors as ``swap``.
        """
        fee = self.linear_fee(st_token_amount)
        token_out = apply_fee(st_token_amount, fee)
        if token_out > self._token:
            logger.debug(
                "swap rejected: token_out=%d > token=%d (fee=%d)", token_out, self._token, fee
            )
            raise InsufficientLiquidity()
        return SwapQuote(fee=fee, token_out=token_out)

    def swap(self, st_token_amount: int) -> int:
        """
        Immediate unstake: take ``st_token_amount`` staked token, pay out base token minus the fee.

        The full staked amount stays in the pool; the fee is the spread that
        liquidity providers realize when they remove liquidity.
        """
        quote = self.quote_swap(st_token_amount)
        new_st_token = checked_add(self._st_token, st_token_amount)
        new_token = checked_sub(self._token, quote.token_out)

        self._token = new_token
        self._st_token = new_st_token
        logger.debug(
            "swap: st_token_amount=%d fee=%d token_out=%d", st_token_amount, quote.fee, quote.token_out
        )
        return quote.token_out

    def __repr__(self) -> str:
        return (
            f"LiqPool(token={self._token}, st_token={self._st_token}, "
            f"lp_token_supply={self._lp_token_supply})"
        )


def create_pool(max_fee: int, min_fee: int, liq_target: int) -> CreatePoolResult:
    """Construct a pool, reporting a misconfiguration as a failed result instead of raising."""
    try:
        pool = LiqPool(max_fee, min_fee, liq_target)
    except (InvalidPoolConfig, TypeError) as exc:
        return CreatePoolResult(ok=False, error=str(exc))
    return CreatePoolResult(ok=True, pool=pool)
