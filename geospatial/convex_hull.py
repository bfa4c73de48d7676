"""
Convex Hull of a Point Set.

Used to show the spatial spread of the participants. The hull is computed
in planar (longitude, latitude) space with Andrew's monotone-chain variant
of the Graham scan, so it is meant for display of sets that do not straddle
the antimeridian.
"""

from typing import List, Sequence

from common.types import GeoPoint, HullPolygon, PointSet

# Tolerance for orientation tests in hull_contains, in squared degrees
_CONTAINMENT_TOLERANCE = 1e-12


def _cross(o: GeoPoint, a: GeoPoint, b: GeoPoint) -> float:
    """Z component of (a - o) x (b - o) with x = lng, y = lat.

    Positive for a counter-clockwise turn o -> a -> b, negative for
    clockwise, zero for collinear.
    """
    return (a.lng - o.lng) * (b.lat - o.lat) - (a.lat - o.lat) * (b.lng - o.lng)


def _half_hull(points: Sequence[GeoPoint]) -> List[GeoPoint]:
    chain: List[GeoPoint] = []
    for p in points:
        # Collinear vertices are dropped, only strict left turns survive
        while len(chain) >= 2 and _cross(chain[-2], chain[-1], p) <= 0:
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(points: PointSet) -> HullPolygon:
    """Compute the convex hull of a point set.

    Parameters
    ----------
    points : sequence of GeoPoint
        Input points in degrees. May be empty.

    Returns
    -------
    HullPolygon
        Hull vertices in counter-clockwise order (x = lng, y = lat),
        starting at the vertex with the smallest (lng, lat). The first
        vertex is not repeated at the end.

        With fewer than 3 distinct points the input is returned unchanged
        as a list. If every point is collinear the two extreme points are
        returned.

    Notes
    -----
    1. Sort the distinct points by (lng, lat).
    2. Build the lower chain left to right and the upper chain right to
       left, popping the last vertex while the turn is not strictly
       counter-clockwise.
    3. Join the chains, dropping each chain's last point since it is the
       first point of the other.

    O(n log n), dominated by the sort.
    """
    unique = sorted(set(points), key=lambda p: (p.lng, p.lat))
    if len(unique) < 3:
        return list(points)

    lower = _half_hull(unique)
    upper = _half_hull(unique[::-1])

    return lower[:-1] + upper[:-1]


def hull_contains(hull: HullPolygon, point: GeoPoint) -> bool:
    """Check whether a point lies inside or on the boundary of a hull.

    Parameters
    ----------
    hull : HullPolygon
        Output of `convex_hull` (counter-clockwise).
    point : GeoPoint
        Point to test.

    Returns
    -------
    bool
        True if the point is inside or on an edge. A one-vertex hull only
        contains that vertex; a two-vertex hull contains its segment.
        Repeated vertices, as in the unchanged input `convex_hull` returns
        for fewer than 3 distinct points, count once.
    """
    hull = list(dict.fromkeys(hull))

    if len(hull) == 0:
        return False

    if len(hull) == 1:
        return hull[0] == point

    if len(hull) == 2:
        a, b = hull
        if abs(_cross(a, b, point)) > _CONTAINMENT_TOLERANCE:
            return False
        return (
            min(a.lng, b.lng) <= point.lng <= max(a.lng, b.lng)
            and min(a.lat, b.lat) <= point.lat <= max(a.lat, b.lat)
        )

    for i in range(len(hull)):
        if _cross(hull[i], hull[(i + 1) % len(hull)], point) < -_CONTAINMENT_TOLERANCE:
            return False
    return True
