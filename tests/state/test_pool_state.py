"""Tests for liqpool/state/pool_state.py: snapshots and serialization."""

import pytest

from liqpool.core.calc import U64_MAX, UNIT
from liqpool.core.errors import InvalidPoolConfig
from liqpool.state.pool_state import (
    STATE_VAR_NAMES,
    PoolState,
    initial_state,
    state_from_dict,
    state_to_dict,
)


class TestInitialState:
    def test_zero_balances(self):
        s = initial_state(3 * UNIT // 100, 3 * UNIT // 1000, 500 * UNIT)
        assert s.token == 0
        assert s.st_token == 0
        assert s.lp_token_supply == 0
        assert s.liq_target == 500 * UNIT

    def test_frozen(self):
        s = initial_state(1, 0, 0)
        with pytest.raises(AttributeError):
            s.token = 1  # type: ignore


class TestValidation:
    def test_max_below_min(self):
        with pytest.raises(InvalidPoolConfig):
            PoolState(max_fee=0, min_fee=1, liq_target=0)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            PoolState(max_fee=1, min_fee=0, liq_target=0, token=U64_MAX + 1)
        with pytest.raises(ValueError):
            PoolState(max_fee=1, min_fee=0, liq_target=0, st_token=-1)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            PoolState(max_fee=1, min_fee=0, liq_target=0, token=True)


class TestStateVarNames:
    def test_names(self):
        assert STATE_VAR_NAMES == (
            "max_fee",
            "min_fee",
            "liq_target",
            "token",
            "st_token",
            "lp_token_supply",
        )


class TestRoundTrip:
    def test_custom_state_round_trip(self):
        s = PoolState(
            max_fee=3 * UNIT // 100,
            min_fee=3 * UNIT // 1000,
            liq_target=500 * UNIT,
            token=505259432556,
            st_token=499724632445,
            lp_token_supply=996704663617,
        )
        assert state_from_dict(state_to_dict(s)) == s

    def test_missing_key(self):
        d = state_to_dict(initial_state(1, 0, 0))
        del d["st_token"]
        with pytest.raises(KeyError):
            state_from_dict(d)

    def test_wrong_type(self):
        d = state_to_dict(initial_state(1, 0, 0))
        d["token"] = "10"
        with pytest.raises(TypeError):
            state_from_dict(d)


class TestOutOfRangeIsConfigError:
    def test_matches_fee_curve(self):
        with pytest.raises(InvalidPoolConfig, match="out of u64 range"):
            PoolState(max_fee=U64_MAX + 1, min_fee=0, liq_target=0)
