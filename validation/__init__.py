"""
Validation Tools for Participant Coordinates.

These checks belong to the caller side; the engine does not run them.
"""

from validation.coordinate_checks import (
    CoordinateChecker,
    ValidationResult,
    is_valid_point,
)

__all__ = [
    "CoordinateChecker",
    "ValidationResult",
    "is_valid_point",
]
