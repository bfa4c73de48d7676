"""
Coordinate Checks for Participant Locations.

The aggregation engine never validates its inputs: out-of-range or NaN
coordinates flow straight through the math. Screening them is the job of
the location-input layer, which uses the checks in this module before
handing a point set to the engine.

Check Categories
----------------
1. Finiteness (no NaN or infinity)
2. Latitude range [-90, 90]
3. Longitude range [-180, 180]
"""

from dataclasses import dataclass
from typing import Any, Dict, List
import numpy as np

from common.errors import InvalidArgumentError
from common.logging_config import get_logger
from common.types import GeoPoint, PointSet, to_coordinate_array

LATITUDE_BOUNDS = (-90.0, 90.0)
LONGITUDE_BOUNDS = (-180.0, 180.0)


@dataclass
class ValidationResult:
    """Outcome of one coordinate check over a point set.

    Attributes
    ----------
    test_name : str
        Check identifier, e.g. "latitude_bounds".
    passed : bool
        True when no point violates the check.
    message : str
        Violation count, shown to the user next to the location form.
    details : dict
        Offending point indices under 'indices'; bounds checks add the
        finite value 'range' and the allowed 'bounds'.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class CoordinateChecker:
    """Checker for participant coordinates.

    Runs every check over a whole point set so a form can report all
    problems at once.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Set up the checker for a location form.

        Parameters
        ----------
        strict_mode : bool
            Reject the point set with InvalidArgumentError at the first
            failed check instead of returning every result.
        log_violations : bool
            Log a WARNING per failed check, naming how many points are
            out of range or non-finite.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("CoordinateChecker")

    def check_all(self, points: PointSet) -> List[ValidationResult]:
        """Run all coordinate checks on a point set.

        Parameters
        ----------
        points : sequence of GeoPoint
            Points to check. An empty set passes every check.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.

        Raises
        ------
        InvalidArgumentError
            In strict mode, when a check fails.
        """
        coords = to_coordinate_array(points)

        results = [
            self.check_finite(coords),
            self.check_latitude_bounds(coords),
            self.check_longitude_bounds(coords),
        ]

        for result in results:
            if result.passed:
                continue
            if self.log_violations:
                self._logger.warning(f"{result.test_name}: {result.message}")
            if self.strict_mode:
                raise InvalidArgumentError(result.message)

        return results

    def check_finite(self, coords: np.ndarray) -> ValidationResult:
        """Check that every coordinate is a finite number."""
        bad = ~np.all(np.isfinite(coords), axis=1)
        indices = np.flatnonzero(bad).tolist()

        return ValidationResult(
            test_name="finite_coordinates",
            passed=len(indices) == 0,
            message=f"Finiteness check: {len(indices)} violations",
            details={'indices': indices}
        )

    def check_latitude_bounds(self, coords: np.ndarray) -> ValidationResult:
        """Check that latitudes lie in [-90, 90]."""
        return self._check_bounds(coords[:, 0], LATITUDE_BOUNDS, "latitude_bounds")

    def check_longitude_bounds(self, coords: np.ndarray) -> ValidationResult:
        """Check that longitudes lie in [-180, 180]."""
        return self._check_bounds(coords[:, 1], LONGITUDE_BOUNDS, "longitude_bounds")

    def _check_bounds(
        self,
        values: np.ndarray,
        bounds: tuple,
        test_name: str
    ) -> ValidationResult:
        min_val, max_val = bounds
        # NaN is reported by check_finite, not here
        violations = (values < min_val) | (values > max_val)
        indices = np.flatnonzero(violations).tolist()

        finite = values[np.isfinite(values)]
        value_range = (
            (float(np.min(finite)), float(np.max(finite))) if finite.size else None
        )

        return ValidationResult(
            test_name=test_name,
            passed=len(indices) == 0,
            message=f"{test_name.replace('_', ' ').capitalize()} check: "
                    f"{len(indices)} violations",
            details={
                'indices': indices,
                'range': value_range,
                'bounds': bounds,
            }
        )


def is_valid_point(point: GeoPoint) -> bool:
    """Quick check of a single point: finite and within range."""
    if not (np.isfinite(point.lat) and np.isfinite(point.lng)):
        return False
    return (
        LATITUDE_BOUNDS[0] <= point.lat <= LATITUDE_BOUNDS[1]
        and LONGITUDE_BOUNDS[0] <= point.lng <= LONGITUDE_BOUNDS[1]
    )
