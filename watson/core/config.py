"""Configuration object for the Bowyer-Watson engine."""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .constants import (
    EPS_CIRCUMCIRCLE, EPS_COMPLETED, SUPER_MARGIN, EDGE_POOL_FACTOR,
)


@dataclass
class DelaunayConfig:
    # Triangles pre-warmed per engine; None sizes the pool from the queued points
    pool_size: Optional[int] = None
    edge_pool_factor: int = EDGE_POOL_FACTOR
    completed_eps: float = EPS_COMPLETED
    circumcircle_eps: float = EPS_CIRCUMCIRCLE
    super_margin: float = SUPER_MARGIN
    # Drop triangles that touch a super-quad corner from exported results
    strip_super: bool = False
    # Remove coincident input points before insertion (logged)
    reject_duplicates: bool = True
    # Check the empty-circumcircle property every N insertions (0 = off)
    validate_every: int = 0
    # Progress log interval in insertions (0 = off)
    log_every: int = 0

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]]) -> 'DelaunayConfig':
        """Build a config from a mapping, ignoring unknown keys."""
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ['DelaunayConfig']
