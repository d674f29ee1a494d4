"""
Domain models and value objects.

Contains lattice entities: bound policies, LatticeDimension, Lattice.
"""

from src.core.domain.bounds import (
    BoundPolicy,
    RangeBounded,
    Unbounded,
    ZeroBounded,
    resolve_index,
    sign_preserving_mod,
    truncated_rem,
)
from src.core.domain.lattice import Lattice, LatticeDimension

__all__ = [
    # Bounds module
    "BoundPolicy",
    "Unbounded",
    "ZeroBounded",
    "RangeBounded",
    "resolve_index",
    "sign_preserving_mod",
    "truncated_rem",
    # Lattice model
    "Lattice",
    "LatticeDimension",
]
