"""Engine configuration"""
from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..errors import InvalidConfigError
from ..fixed_point import apply_bps
from ..constants import (
    BPS_SCALE,
    DEFAULT_COLLATERAL_REQUIREMENT_BPS,
    MIN_COLLATERAL_REQUIREMENT_BPS,
    MAX_COLLATERAL_REQUIREMENT_BPS,
)


@dataclass(frozen=True)
class EngineConfig:
    """Process-wide engine settings, fixed at construction"""
    collateral_requirement_bps: int = DEFAULT_COLLATERAL_REQUIREMENT_BPS

    def __post_init__(self):
        bps = self.collateral_requirement_bps
        if isinstance(bps, bool) or not isinstance(bps, int):
            raise InvalidConfigError(f"collateral_requirement_bps must be an int, got {bps!r}")
        if not MIN_COLLATERAL_REQUIREMENT_BPS <= bps <= MAX_COLLATERAL_REQUIREMENT_BPS:
            raise InvalidConfigError(
                f"collateral_requirement_bps must be within "
                f"[{MIN_COLLATERAL_REQUIREMENT_BPS}, {MAX_COLLATERAL_REQUIREMENT_BPS}], got {bps}"
            )

    @property
    def max_ltv_bps(self) -> int:
        """Share of collateral value that may be borrowed, in bps"""
        return BPS_SCALE - self.collateral_requirement_bps

    def max_borrowable(self, collateral_amount: int) -> int:
        """Calculate maximum debt value (in base currency) for given collateral"""
        # max_borrowable = collateral * (10000 - requirement) / 10000
        return apply_bps(collateral_amount, self.max_ltv_bps)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from a plain dict, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in mapping.items() if key in known})
