"""
Domain value objects.

Contains the angle unit types Degrees and Radians and the conversion protocol.
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

__all__ = [
    "DEGREES_PER_HALF_TURN",
    "AngleConversionError",
    "AngleLike",
    "Degrees",
    "DegreesLike",
    "Radians",
    "RadiansLike",
    "as_degrees",
    "as_radians",
]
