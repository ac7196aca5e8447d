"""
Command interface over a ``LiqPool``.

Intended for embedding shells that want a result value instead of an
exception:
- Inputs are a tag plus integer args.
- Outputs are (ok, value, post-state) or an error with a stable code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Optional

from ..state.pool_state import PoolState
from .errors import LiqPoolError
from .liq_pool import LiqPool

INVALID_COMMAND = "INVALID_COMMAND"


@dataclass(frozen=True)
class PoolCommand:
    tag: Literal["add_liquidity", "remove_liquidity", "swap"]
    args: Mapping[str, Any]


@dataclass(frozen=True)
class PoolStepResult:
    ok: bool
    value: Any = None
    state: Optional[PoolState] = None
    error: Optional[str] = None
    code: Optional[str] = None


class InvalidCommand(ValueError):
    pass


def _int_arg(args: Mapping[str, Any], name: str) -> int:
    if not isinstance(args, Mapping):
        raise InvalidCommand("args must be a mapping")
    v = args.get(name)
    if not isinstance(v, int) or isinstance(v, bool):
        raise InvalidCommand(f"invalid param {name}")
    return v


def _dispatch(pool: LiqPool, cmd: PoolCommand) -> Any:
    if cmd.tag == "add_liquidity":
        return pool.add_liquidity(_int_arg(cmd.args, "token_amount"))
    if cmd.tag == "remove_liquidity":
        return pool.remove_liquidity(_int_arg(cmd.args, "lp_amount"))
    if cmd.tag == "swap":
        return pool.swap(_int_arg(cmd.args, "st_token_amount"))
    raise InvalidCommand(f"unknown action: {cmd.tag}")


def step(pool: LiqPool, cmd: PoolCommand) -> PoolStepResult:
    """Execute a pool command, reporting pool errors in the result."""
    try:
        out = _dispatch(pool, cmd)
    except InvalidCommand as exc:
        return PoolStepResult(ok=False, error=str(exc), code=INVALID_COMMAND)
    except LiqPoolError as exc:
        return PoolStepResult(ok=False, error=str(exc), code=exc.code)
    return PoolStepResult(ok=True, value=out, state=pool.snapshot())


def step_or_raise(pool: LiqPool, cmd: PoolCommand) -> PoolStepResult:
    """Like ``step()`` but raises the underlying error on rejection."""
    out = _dispatch(pool, cmd)
    return PoolStepResult(ok=True, value=out, state=pool.snapshot())
