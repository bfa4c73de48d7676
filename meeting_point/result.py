"""
Meeting-Point Result Assembly.

This module combines the aggregates from `geospatial` into the result the
display layer shows:
- Both candidate rendezvous points (centroid and geometric median)
- Each participant's distance to each candidate
- The total travel distance for each candidate
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from common.errors import InvalidArgumentError
from common.logging_config import get_logger
from common.types import GeoPoint, HullPolygon, Location, WeiszfeldConfig
from common.units import format_distance
from geospatial.aggregation import centroid, geometric_median
from geospatial.convex_hull import convex_hull
from geospatial.coordinate_models import EARTH_SPHERE, SphereParameters
from geospatial.distance_calculations import haversine_distance


@dataclass(frozen=True)
class LocationDistances:
    """Distances from one participant to both candidates.

    Attributes
    ----------
    location : Location
        The participant.
    to_centroid_km : float
        Great-circle distance to the centroid in kilometres.
    to_median_km : float
        Great-circle distance to the geometric median in kilometres.
    """
    location: Location
    to_centroid_km: float
    to_median_km: float


@dataclass
class MeetingPointResult:
    """Result of a meeting-point calculation.

    Attributes
    ----------
    centroid : GeoPoint
        Arithmetic mean of all locations.
    geometric_median : GeoPoint
        Weiszfeld point of all locations.
    locations : List[Location]
        Input locations, in input order.
    distances : List[LocationDistances]
        Per-location distances, aligned with `locations`.
    centroid_total_km : float
        Sum of all distances to the centroid.
    median_total_km : float
        Sum of all distances to the geometric median.
    """
    centroid: GeoPoint
    geometric_median: GeoPoint
    locations: List[Location]
    distances: List[LocationDistances] = field(default_factory=list)
    centroid_total_km: float = 0.0
    median_total_km: float = 0.0

    @property
    def points(self) -> List[GeoPoint]:
        """Bare coordinates of the locations."""
        return [loc.point for loc in self.locations]

    @property
    def hull(self) -> HullPolygon:
        """Convex hull of the location coordinates."""
        return convex_hull(self.points)

    def summary_rows(self) -> List[Dict[str, Any]]:
        """Build display rows, one per location.

        Returns
        -------
        list of dict
            Keys: 'label', 'to_centroid', 'to_median' (formatted strings).
        """
        return [
            {
                'label': d.location.label,
                'to_centroid': format_distance(d.to_centroid_km),
                'to_median': format_distance(d.to_median_km),
            }
            for d in self.distances
        ]


class MeetingPointCalculator:
    """Computes both rendezvous candidates for a set of locations.

    Examples
    --------
    >>> calculator = MeetingPointCalculator()
    >>> result = calculator.compute([
    ...     Location("Tokyo", GeoPoint(35.6762, 139.6503)),
    ...     Location("Osaka", GeoPoint(34.6937, 135.5023)),
    ... ])
    >>> result.median_total_km <= result.centroid_total_km + 1
    True
    """

    def __init__(
        self,
        config: Optional[WeiszfeldConfig] = None,
        sphere: SphereParameters = EARTH_SPHERE
    ):
        """Initialize the calculator.

        Parameters
        ----------
        config : WeiszfeldConfig, optional
            Solver settings for the geometric median.
        sphere : SphereParameters
            Reference sphere for every distance.
        """
        self.config = config or WeiszfeldConfig()
        self.sphere = sphere
        self._logger = get_logger("MeetingPointCalculator")

    def compute(self, locations: Sequence[Location]) -> MeetingPointResult:
        """Compute centroid, geometric median and distances.

        Parameters
        ----------
        locations : sequence of Location
            Non-empty participant locations.

        Returns
        -------
        MeetingPointResult

        Raises
        ------
        InvalidArgumentError
            If `locations` is empty.
        """
        if len(locations) == 0:
            raise InvalidArgumentError("At least one location is required")

        points = [loc.point for loc in locations]
        center = centroid(points)
        median = geometric_median(points, self.config, self.sphere)

        distances = [
            LocationDistances(
                location=loc,
                to_centroid_km=haversine_distance(center, loc.point, self.sphere),
                to_median_km=haversine_distance(median, loc.point, self.sphere),
            )
            for loc in locations
        ]

        result = MeetingPointResult(
            centroid=center,
            geometric_median=median,
            locations=list(locations),
            distances=distances,
            centroid_total_km=sum(d.to_centroid_km for d in distances),
            median_total_km=sum(d.to_median_km for d in distances),
        )

        self._logger.debug(
            f"Meeting point for {len(locations)} locations: "
            f"centroid total={result.centroid_total_km:.3f} km, "
            f"median total={result.median_total_km:.3f} km"
        )

        return result


def compute_meeting_point(
    locations: Sequence[Location],
    config: Optional[WeiszfeldConfig] = None
) -> MeetingPointResult:
    """Convenience wrapper around `MeetingPointCalculator.compute`."""
    return MeetingPointCalculator(config=config).compute(locations)
