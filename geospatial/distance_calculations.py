"""
Great-Circle Distance Calculations on a Spherical Earth.

This module provides the distance metric used by every aggregate in the
engine: the haversine formula on a sphere of radius R = 6371 km.

Scientific Context
------------------
Domain: Spherical trigonometry
Model: Great circle (shortest path) on a sphere

The haversine form is numerically well conditioned for small distances,
where the spherical law of cosines loses precision. It works on angular
differences, so a pair straddling the antimeridian (179°E / 179°W) comes
out ~222 km apart rather than ~39,800 km.

Accuracy
--------
The spherical model differs from the WGS84 geodesic by up to ~0.5%. This is
well inside what a meeting-point choice needs.

References
----------
- Sinnott, R.W. (1984). Virtues of the Haversine. Sky and Telescope, 68(2), 159.
"""

import numpy as np
from numpy.typing import NDArray

from common.types import GeoPoint, PointSet, to_coordinate_array
from geospatial.coordinate_models import EARTH_SPHERE, SphereParameters


def haversine_distance(
    a: GeoPoint,
    b: GeoPoint,
    sphere: SphereParameters = EARTH_SPHERE
) -> float:
    """Compute the great-circle distance between two points.

    Parameters
    ----------
    a, b : GeoPoint
        Points in degrees.
    sphere : SphereParameters
        Reference sphere (default: Earth mean sphere).

    Returns
    -------
    float
        Distance in kilometres. Zero for identical points, symmetric in
        its arguments and never negative.

    Notes
    -----
    h = sin²(Δφ/2) + cos φ₁ cos φ₂ sin²(Δλ/2)
    d = 2R asin(√h)

    Coordinates are not range-checked.

    Examples
    --------
    >>> tokyo = GeoPoint(35.6762, 139.6503)
    >>> osaka = GeoPoint(34.6937, 135.5023)
    >>> 380 < haversine_distance(tokyo, osaka) < 420
    True
    """
    d_lat = np.radians(b.lat - a.lat)
    d_lng = np.radians(b.lng - a.lng)

    half_sin_lat = np.sin(d_lat / 2)
    half_sin_lng = np.sin(d_lng / 2)

    h = (
        half_sin_lat * half_sin_lat
        + np.cos(np.radians(a.lat)) * np.cos(np.radians(b.lat))
        * half_sin_lng * half_sin_lng
    )
    # Rounding can push h a hair above 1 for antipodal pairs
    h = min(h, 1.0)

    return float(2 * sphere.radius_km * np.arcsin(np.sqrt(h)))


def haversine_distance_batch(
    origin: GeoPoint,
    points: PointSet,
    sphere: SphereParameters = EARTH_SPHERE
) -> NDArray[np.float64]:
    """Compute distances from one point to each point of a set.

    This is the vectorized version used by the geometric median solver.

    Parameters
    ----------
    origin : GeoPoint
        Reference point in degrees.
    points : sequence of GeoPoint
        Target points in degrees.
    sphere : SphereParameters
        Reference sphere.

    Returns
    -------
    ndarray
        (N,) distances in kilometres, in input order.
    """
    coords = to_coordinate_array(points)
    lats = coords[:, 0]
    lngs = coords[:, 1]

    half_sin_lat = np.sin(np.radians(lats - origin.lat) / 2)
    half_sin_lng = np.sin(np.radians(lngs - origin.lng) / 2)

    h = (
        half_sin_lat * half_sin_lat
        + np.cos(np.radians(origin.lat)) * np.cos(np.radians(lats))
        * half_sin_lng * half_sin_lng
    )
    h = np.minimum(h, 1.0)

    return 2 * sphere.radius_km * np.arcsin(np.sqrt(h))


def total_distance(
    origin: GeoPoint,
    points: PointSet,
    sphere: SphereParameters = EARTH_SPHERE
) -> float:
    """Sum of distances from a point to every point of a set, in kilometres.

    This is the objective the geometric median minimizes.
    """
    if len(points) == 0:
        return 0.0
    return float(np.sum(haversine_distance_batch(origin, points, sphere)))
