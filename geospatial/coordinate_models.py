"""
Coordinate Models for a Spherical Earth.

This module implements the mapping between geographic coordinates and
Earth-Centered, Earth-Fixed (ECEF) Cartesian coordinates on a sphere of
fixed radius.

Scientific Context
------------------
Domain: Spherical geometry
Model: Sphere of radius R = 6371 km (not an ellipsoid)

Averaging latitude/longitude pairs directly distorts results near the poles
and across the antimeridian, where degree-space is discontinuous. Averaging
unit vectors in ECEF space and projecting back onto the sphere does not
suffer from this. `geospatial.aggregation.ecef_centroid` is built on these
transforms; the plain `centroid` is not.

Notes
-----
The ECEF frame has:
- Origin at Earth's center
- X-axis through the prime meridian (0° longitude) at the equator
- Y-axis through 90°E at the equator
- Z-axis through the North Pole
"""

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from common.constants import GeoConstants
from common.types import GeoPoint, ECEFPoint, PointSet, to_coordinate_array


@dataclass(frozen=True)
class SphereParameters:
    """Parameters defining a reference sphere.

    Attributes
    ----------
    radius_km : float
        Radius of the sphere in kilometres.
    name : str
        Identifier for the sphere.
    """
    radius_km: float
    name: str


# Mean-radius Earth sphere - the reference for every calculation in the engine
EARTH_SPHERE = SphereParameters(
    radius_km=GeoConstants.EARTH_MEAN_RADIUS.value,
    name="EarthMeanSphere"
)


def to_ecef(point: GeoPoint, sphere: SphereParameters = EARTH_SPHERE) -> ECEFPoint:
    """Convert geographic coordinates to ECEF.

    Parameters
    ----------
    point : GeoPoint
        Point in degrees.
    sphere : SphereParameters
        Reference sphere (default: Earth mean sphere).

    Returns
    -------
    ECEFPoint
        (x, y, z) in kilometres. Its norm equals the sphere radius.

    Notes
    -----
    x = R cos(φ) cos(λ)
    y = R cos(φ) sin(λ)
    z = R sin(φ)
    """
    lat_rad, lng_rad = point.to_radians()
    cos_lat = np.cos(lat_rad)
    R = sphere.radius_km

    return ECEFPoint(
        x=float(R * cos_lat * np.cos(lng_rad)),
        y=float(R * cos_lat * np.sin(lng_rad)),
        z=float(R * np.sin(lat_rad)),
    )


def from_ecef(coord: ECEFPoint, sphere: SphereParameters = EARTH_SPHERE) -> GeoPoint:
    """Convert ECEF coordinates back to geographic coordinates.

    Parameters
    ----------
    coord : ECEFPoint
        Cartesian coordinate in kilometres.
    sphere : SphereParameters
        Reference sphere (default: Earth mean sphere).

    Returns
    -------
    GeoPoint
        Point in degrees.

    Notes
    -----
    φ = asin(z / R), λ = atan2(y, x)

    z / R is clipped to [-1, 1] so rounding just past a pole cannot
    produce NaN. At the poles longitude is atan2(0, 0) = 0.
    """
    ratio = np.clip(coord.z / sphere.radius_km, -1.0, 1.0)
    lat_rad = np.arcsin(ratio)
    lng_rad = np.arctan2(coord.y, coord.x)

    return GeoPoint.from_radians(lat_rad, lng_rad)


# Vectorized version for batch processing
def to_ecef_batch(
    points: PointSet,
    sphere: SphereParameters = EARTH_SPHERE
) -> NDArray[np.float64]:
    """Vectorized geographic to ECEF conversion.

    Parameters
    ----------
    points : sequence of GeoPoint
        Points in degrees.
    sphere : SphereParameters
        Reference sphere.

    Returns
    -------
    ndarray
        (N, 3) array of (x, y, z) in kilometres.
    """
    coords = np.radians(to_coordinate_array(points))
    lat_rad = coords[:, 0]
    lng_rad = coords[:, 1]
    cos_lat = np.cos(lat_rad)
    R = sphere.radius_km

    return np.column_stack((
        R * cos_lat * np.cos(lng_rad),
        R * cos_lat * np.sin(lng_rad),
        R * np.sin(lat_rad),
    ))
