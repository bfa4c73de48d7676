"""
Common utilities and infrastructure for the meeting-point engine.

This package provides foundational components used across all modules:
- Geographic constants with provenance
- Immutable value types (points, ECEF coordinates, solver configuration)
- The engine's error type
- Distance units and display formatting
- Logging setup
"""

from common.constants import Constant, GeoConstants
from common.errors import InvalidArgumentError
from common.types import (
    GeoPoint,
    ECEFPoint,
    WeiszfeldConfig,
    Location,
    PointSet,
    HullPolygon,
)
from common.units import convert_distance, format_distance
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeoConstants",
    "InvalidArgumentError",
    "GeoPoint",
    "ECEFPoint",
    "WeiszfeldConfig",
    "Location",
    "PointSet",
    "HullPolygon",
    "convert_distance",
    "format_distance",
    "get_logger",
]
