"""
Math primitives для угловых типов

Ширина floating-point и приближённые сравнения.
"""

# Precision
from src.angle.math.precision import DEFAULT_PRECISION, Precision

# Numerical Safeguards
from src.angle.math.numerical_safeguards import (
    # Epsilon constants
    EPS_F32,
    EPS_F64,
    # Epsilon comparisons
    inexact_eq,
)

__all__ = [
    # Precision
    "DEFAULT_PRECISION",
    "Precision",
    # Numerical Safeguards — Epsilon constants
    "EPS_F32",
    "EPS_F64",
    # Numerical Safeguards — Epsilon comparisons
    "inexact_eq",
]
