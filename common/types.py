"""
Type Definitions for the Meeting-Point Aggregation Engine.

This module defines the value types passed between the engine and its
callers. All of them are immutable; a computation creates new values and
never mutates its inputs.

Conventions
-----------
- Geographic coordinates are in DEGREES (latitude first, then longitude).
- Cartesian (ECEF) coordinates are in KILOMETERS.
- Coordinate ranges are NOT validated on construction. Range checks belong
  to the caller; see `validation.coordinate_checks`.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from common.constants import GeoConstants
from common.errors import InvalidArgumentError


@dataclass(frozen=True)
class GeoPoint:
    """A geographic point on the sphere.

    Attributes
    ----------
    lat : float
        Latitude in DEGREES. Expected range: [-90, 90].
    lng : float
        Longitude in DEGREES. Expected range: [-180, 180].

    Examples
    --------
    >>> tokyo = GeoPoint(lat=35.6762, lng=139.6503)
    >>> lat_rad, lng_rad = tokyo.to_radians()
    """
    lat: float
    lng: float

    def to_radians(self) -> Tuple[float, float]:
        """Convert to radians for trigonometry.

        Returns
        -------
        Tuple[float, float]
            (latitude_radians, longitude_radians)
        """
        return float(np.radians(self.lat)), float(np.radians(self.lng))

    @classmethod
    def from_radians(cls, lat_rad: float, lng_rad: float) -> 'GeoPoint':
        """Create a point from radians."""
        return cls(lat=float(np.degrees(lat_rad)), lng=float(np.degrees(lng_rad)))


@dataclass(frozen=True)
class ECEFPoint:
    """Earth-Centered, Earth-Fixed coordinate on a spherical Earth.

    Attributes
    ----------
    x : float
        Kilometres along the axis through (0°, 0°).
    y : float
        Kilometres along the axis through (0°, 90°E).
    z : float
        Kilometres along the axis through the North Pole.
    """
    x: float
    y: float
    z: float

    @property
    def norm(self) -> float:
        """Distance from the Earth's center in kilometres."""
        return float(np.sqrt(self.x**2 + self.y**2 + self.z**2))


@dataclass(frozen=True)
class WeiszfeldConfig:
    """Termination settings for the geometric median solver.

    Attributes
    ----------
    max_iterations : int
        Maximum fixed-point iterations. Zero returns the seed estimate.
    epsilon : float
        Convergence and coincidence threshold in KILOMETERS.
    """
    max_iterations: int = int(GeoConstants.WEISZFELD_MAX_ITERATIONS.value)
    epsilon: float = GeoConstants.WEISZFELD_EPSILON.value

    def __post_init__(self):
        if self.max_iterations < 0:
            raise InvalidArgumentError(
                f"max_iterations must be non-negative, got {self.max_iterations}"
            )
        if not self.epsilon > 0:
            raise InvalidArgumentError(
                f"epsilon must be positive, got {self.epsilon}"
            )


@dataclass(frozen=True)
class Location:
    """A participant location with a display label.

    Attributes
    ----------
    label : str
        Name shown to the user (e.g., "Tokyo Station").
    point : GeoPoint
        Coordinates of the location.
    """
    label: str
    point: GeoPoint


# Type aliases
PointSet = Sequence[GeoPoint]  # Ordered; order only matters for tie-breaking
HullPolygon = List[GeoPoint]  # Counter-clockwise in (lng, lat) space
CoordinateArray = NDArray[np.float64]  # Shape: (N, 2) as (lat, lng) degrees


def to_coordinate_array(points: PointSet) -> CoordinateArray:
    """Stack a point set into an (N, 2) array of (lat, lng) degrees."""
    return np.array([(p.lat, p.lng) for p in points], dtype=np.float64).reshape(-1, 2)
