"""
Point-Set Aggregation: Centroid and Geometric Median.

This module turns a set of participant locations into a single
rendezvous candidate.

Aggregates
----------
1. Centroid: arithmetic mean of latitudes and of longitudes, in degree-space.
   Cheap, but every participant pulls on it in proportion to how far away
   they are, so a single distant participant drags it off.
2. Geometric median: the point minimizing the SUM of great-circle distances
   to all participants. Computed with Weiszfeld's fixed-point iteration,
   seeded at the centroid. Far less sensitive to outliers.
3. ECEF centroid: mean of the points' ECEF vectors projected back onto the
   sphere. Opt-in; `centroid` stays in degree-space.

References
----------
- Weiszfeld, E. (1937). Sur le point pour lequel la somme des distances
  de n points donnés est minimum. Tohoku Math. Journal, 43, 355-386.
- Vardi, Y. & Zhang, C.-H. (2000). The multivariate L1-median and
  associated data depth. PNAS, 97(4), 1423-1426.
"""

from typing import Optional
import numpy as np

from common.errors import InvalidArgumentError
from common.logging_config import get_logger
from common.types import (
    ECEFPoint,
    GeoPoint,
    PointSet,
    WeiszfeldConfig,
    to_coordinate_array,
)
from geospatial.coordinate_models import (
    EARTH_SPHERE,
    SphereParameters,
    from_ecef,
    to_ecef_batch,
)
from geospatial.distance_calculations import (
    haversine_distance,
    haversine_distance_batch,
)

logger = get_logger(__name__)


def centroid(points: PointSet) -> GeoPoint:
    """Compute the arithmetic mean of a point set.

    Latitude and longitude are averaged independently, directly in
    degrees. No ECEF projection is involved.

    Parameters
    ----------
    points : sequence of GeoPoint
        Non-empty point set.

    Returns
    -------
    GeoPoint
        Mean latitude and mean longitude.

    Raises
    ------
    InvalidArgumentError
        If `points` is empty.
    """
    if len(points) == 0:
        raise InvalidArgumentError("Cannot calculate centroid of an empty point set")

    coords = to_coordinate_array(points)
    # Mean of offsets from the first point: identical inputs give that point back exactly
    origin = coords[0]
    mean = origin + np.mean(coords - origin, axis=0)

    return GeoPoint(lat=float(mean[0]), lng=float(mean[1]))


def geometric_median(
    points: PointSet,
    config: Optional[WeiszfeldConfig] = None,
    sphere: SphereParameters = EARTH_SPHERE
) -> GeoPoint:
    """Compute the geometric median (Weiszfeld point) of a point set.

    Minimizes Σ d(estimate, pᵢ), where d is the haversine distance.

    Parameters
    ----------
    points : sequence of GeoPoint
        Non-empty point set.
    config : WeiszfeldConfig, optional
        Iteration bound and epsilon (km). Defaults to `WeiszfeldConfig()`.
    sphere : SphereParameters
        Reference sphere for the distance metric.

    Returns
    -------
    GeoPoint
        The approximate geometric median.

    Raises
    ------
    InvalidArgumentError
        If `points` is empty.

    Notes
    -----
    Algorithm:

    - 1 or 2 points: the centroid is returned directly.
    - Otherwise start from the centroid and repeat up to
      `config.max_iterations` times:

      1. dᵢ = d(estimate, pᵢ) for every input point.
      2. If some dᵢ < ε, return pᵢ at once (the first such point in input
         order). The remaining points are not reweighted.
      3. next = Σ(pᵢ/dᵢ) / Σ(1/dᵢ), averaged in degree-space.
      4. If d(estimate, next) < ε, return next.

    - If the budget runs out the last estimate is returned. This is a
      best-effort result, not an error. `max_iterations=0` therefore returns
      the centroid unchanged.
    """
    if len(points) == 0:
        raise InvalidArgumentError(
            "Cannot calculate geometric median of an empty point set"
        )

    if len(points) <= 2:
        # Midpoint is exact for two points under a locally flat metric
        return centroid(points)

    config = config or WeiszfeldConfig()
    epsilon = config.epsilon

    coords = to_coordinate_array(points)
    estimate = centroid(points)

    for iteration in range(config.max_iterations):
        distances = haversine_distance_batch(estimate, points, sphere)

        coincident = np.flatnonzero(distances < epsilon)
        if coincident.size > 0:
            index = int(coincident[0])
            logger.debug(
                f"Estimate coincides with input point {index} "
                f"after {iteration} iterations"
            )
            return points[index]

        weights = 1.0 / distances
        weighted_mean = (weights @ coords) / np.sum(weights)
        next_estimate = GeoPoint(
            lat=float(weighted_mean[0]),
            lng=float(weighted_mean[1])
        )

        if haversine_distance(estimate, next_estimate, sphere) < epsilon:
            logger.debug(f"Weiszfeld converged after {iteration + 1} iterations")
            return next_estimate

        estimate = next_estimate

    if config.max_iterations > 0:
        logger.warning(
            f"Weiszfeld did not converge within {config.max_iterations} "
            f"iterations (epsilon={epsilon:.1e} km); returning last estimate"
        )

    return estimate


def ecef_centroid(
    points: PointSet,
    sphere: SphereParameters = EARTH_SPHERE
) -> GeoPoint:
    """Compute a projection-correct centroid through ECEF space.

    Each point is lifted to its ECEF vector, the vectors are averaged and
    the mean is pushed back out to the sphere surface. Unlike `centroid`,
    this gives sensible answers for sets straddling the antimeridian or
    surrounding a pole.

    Parameters
    ----------
    points : sequence of GeoPoint
        Non-empty point set.
    sphere : SphereParameters
        Reference sphere.

    Returns
    -------
    GeoPoint
        Spherical mean position.

    Raises
    ------
    InvalidArgumentError
        If `points` is empty.

    Notes
    -----
    When the mean vector is at the Earth's center (e.g. two antipodal
    points) there is no preferred direction; the degree-space centroid is
    returned instead.
    """
    if len(points) == 0:
        raise InvalidArgumentError("Cannot calculate centroid of an empty point set")

    mean = np.mean(to_ecef_batch(points, sphere), axis=0)
    norm = float(np.linalg.norm(mean))

    if norm < 1e-9 * sphere.radius_km:
        logger.debug("ECEF mean vector vanishes; using degree-space centroid")
        return centroid(points)

    scale = sphere.radius_km / norm
    return from_ecef(
        ECEFPoint(
            x=float(mean[0] * scale),
            y=float(mean[1] * scale),
            z=float(mean[2] * scale)
        ),
        sphere
    )
