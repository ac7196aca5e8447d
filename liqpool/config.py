"""
Pool configuration.

Parameters may be given as raw UNIT-scaled integers or in convenience units:

    pool:
      max_fee_bps: 300        # 3%
      min_fee_bps: 30         # 0.3%
      liq_target_tokens: 100000

Raw form uses ``max_fee``, ``min_fee`` and ``liq_target``. A field may not be
given in both forms.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from .core.calc import UNIT
from .core.errors import InvalidPoolConfig
from .core.fees import FeeCurve
from .core.liq_pool import LiqPool


BPS_DENOM = 10_000

# field -> (convenience key, multiplier numerator, multiplier denominator)
_ALIASES = {
    "max_fee": ("max_fee_bps", UNIT, BPS_DENOM),
    "min_fee": ("min_fee_bps", UNIT, BPS_DENOM),
    "liq_target": ("liq_target_tokens", UNIT, 1),
}


@dataclass(frozen=True)
class PoolConfig:
    max_fee: int
    min_fee: int
    liq_target: int

    def __post_init__(self) -> None:
        # Same checks as the pool constructor.
        FeeCurve(max_fee=self.max_fee, min_fee=self.min_fee, liq_target=self.liq_target)

    def build_pool(self) -> LiqPool:
        return LiqPool(self.max_fee, self.min_fee, self.liq_target)


def _require_int(key: str, v: Any) -> int:
    if not isinstance(v, int) or isinstance(v, bool):
        raise InvalidPoolConfig(f"{key} must be an int, got {type(v).__name__}")
    if v < 0:
        raise InvalidPoolConfig(f"{key} must be non-negative: {v}")
    return v


def pool_config_from_mapping(obj: Mapping[str, Any]) -> PoolConfig:
    """Build a PoolConfig from a mapping in raw or convenience units."""
    if not isinstance(obj, Mapping):
        raise InvalidPoolConfig("pool config must be a mapping")

    known = set(_ALIASES) | {alias for alias, _, _ in _ALIASES.values()}
    unknown = sorted(str(k) for k in obj if k not in known)
    if unknown:
        raise InvalidPoolConfig(f"unknown pool config keys: {', '.join(unknown)}")

    values: dict[str, int] = {}
    for field, (alias, num, den) in _ALIASES.items():
        if field in obj and alias in obj:
            raise InvalidPoolConfig(f"give either {field} or {alias}, not both")
        if field in obj:
            values[field] = _require_int(field, obj[field])
        elif alias in obj:
            values[field] = _require_int(alias, obj[alias]) * num // den
        else:
            raise InvalidPoolConfig(f"missing pool config key: {field} (or {alias})")

    return PoolConfig(**values)


def load_pool_config(path: Union[str, Path]) -> PoolConfig:
    """Load a PoolConfig from a YAML file (optionally nested under ``pool:``)."""
    p = Path(path)
    obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    if isinstance(obj, Mapping) and "pool" in obj:
        obj = obj["pool"]
    if not isinstance(obj, Mapping):
        raise InvalidPoolConfig(f"{p}: pool config YAML must be a mapping")
    return pool_config_from_mapping(obj)
