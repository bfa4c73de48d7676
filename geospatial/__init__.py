"""
Geospatial Module for the Meeting-Point Engine.

All Earth-surface calculations in the engine originate from this module.
Everything here is a pure function: no I/O, no shared mutable state.

This module provides:
- Spherical coordinate model and ECEF transforms
- Great-circle (haversine) distances
- Centroid and geometric median aggregation
- Convex hull of a point set
"""

from geospatial.coordinate_models import (
    SphereParameters,
    EARTH_SPHERE,
    to_ecef,
    from_ecef,
    to_ecef_batch,
)

from geospatial.distance_calculations import (
    haversine_distance,
    haversine_distance_batch,
    total_distance,
)

from geospatial.aggregation import (
    centroid,
    geometric_median,
    ecef_centroid,
)

from geospatial.convex_hull import (
    convex_hull,
    hull_contains,
)

__all__ = [
    # Coordinate models
    "SphereParameters",
    "EARTH_SPHERE",
    "to_ecef",
    "from_ecef",
    "to_ecef_batch",
    # Distance calculations
    "haversine_distance",
    "haversine_distance_batch",
    "total_distance",
    # Aggregation
    "centroid",
    "geometric_median",
    "ecef_centroid",
    # Convex hull
    "convex_hull",
    "hull_contains",
]
