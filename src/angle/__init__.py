"""
Typed planar angles.

Degrees и Radians — immutable обёртки над одним float-значением, которые
не позволяют смешивать единицы угла без явной конверсии.
"""

from src.angle.domain.units import (
    DEGREES_PER_HALF_TURN,
    AngleConversionError,
    AngleLike,
    Degrees,
    DegreesLike,
    Radians,
    RadiansLike,
    as_degrees,
    as_radians,
)
from src.angle.math.numerical_safeguards import EPS_F32, EPS_F64, inexact_eq
from src.angle.math.precision import DEFAULT_PRECISION, Precision

__all__ = [
    # Angle types
    "Degrees",
    "Radians",
    "AngleLike",
    "DegreesLike",
    "RadiansLike",
    # Conversion protocol
    "as_degrees",
    "as_radians",
    "AngleConversionError",
    # Precision
    "Precision",
    "DEFAULT_PRECISION",
    # Constants
    "DEGREES_PER_HALF_TURN",
    "EPS_F32",
    "EPS_F64",
    # Approximate equality
    "inexact_eq",
]
