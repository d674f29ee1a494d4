"""
Core math modules для rational-lattice

Точная рациональная арифметика без потери точности.
"""

# Ratio (точные дроби)
from src.core.math.ratio import (
    OCTAVE,
    UNITY,
    Ratio,
    RatioDomainViolation,
    complement,
    divide,
    multiply,
    normalize,
    power,
)

__all__ = [
    # Ratio — Constants
    "OCTAVE",
    "UNITY",
    # Ratio — Exceptions
    "RatioDomainViolation",
    # Ratio — Types
    "Ratio",
    # Ratio — Functions
    "complement",
    "divide",
    "multiply",
    "normalize",
    "power",
]
