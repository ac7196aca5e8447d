"""
Fixed-point proportional arithmetic over u64 amounts.

All functions are pure and integer-only. Python ints are the wide
intermediate for multiply-then-divide; every result is range-checked
before it is handed back, so values never silently exceed u64.

Rounding: floor (Python ``//`` on non-negative operands).
"""

from __future__ import annotations

from .errors import CalculationError


# How 1 token is represented; values below UNIT are fractions.
UNIT = 1_000_000_000
U64_MAX = (1 << 64) - 1


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def require_u64(name: str, value: int) -> int:
    """Validate that ``value`` is an int in ``[0, U64_MAX]`` and return it."""
    _require_int(name, value)
    if value < 0 or value > U64_MAX:
        raise CalculationError(f"{name} out of u64 range: {value}")
    return value


def checked_add(a: int, b: int) -> int:
    """``a + b``, raising ``CalculationError`` on u64 overflow."""
    total = a + b
    if total > U64_MAX:
        raise CalculationError(f"u64 overflow: {a} + {b}")
    return total


def checked_sub(a: int, b: int) -> int:
    """``a - b``, raising ``CalculationError`` on underflow."""
    if b > a:
        raise CalculationError(f"u64 underflow: {a} - {b}")
    return a - b


def proportion(amount: int, numerator: int, denominator: int) -> int:
    """
    Compute ``floor(amount * numerator / denominator)``.

    Raises:
        CalculationError: if an operand or the result is outside u64.
        ZeroDivisionError: if ``denominator == 0`` (caller contract).
    """
    for name, v in (
        ("amount", amount),
        ("numerator", numerator),
        ("denominator", denominator),
    ):
        require_u64(name, v)

    result = (amount * numerator) // denominator
    if result > U64_MAX:
        raise CalculationError(f"proportion result exceeds u64: {result}")
    return result


def value(amount: int, price: int) -> int:
    """Apply a UNIT-scaled fraction ``price`` to ``amount``."""
    return proportion(amount, price, UNIT)


def shares(deposit_value: int, total_value: int, total_shares: int) -> int:
    """
    Shares minted for adding ``deposit_value`` to a pool worth ``total_value``
    that has ``total_shares`` outstanding.

    The first mint (``total_shares == 0``) is 1:1.
    """
    if total_shares == 0:
        return require_u64("deposit_value", deposit_value)
    return proportion(deposit_value, total_shares, total_value)


def apply_fee(amount: int, fee: int) -> int:
    """Return ``amount`` with a UNIT-scaled ``fee`` fraction subtracted."""
    return checked_sub(amount, value(amount, fee))
