"""
Geographic Constants for Meeting-Point Computation.

This module provides the numeric constants used by the aggregation engine,
each carried with its unit and provenance.

All distances in the engine are expressed in KILOMETERS on a spherical
Earth. Ellipsoidal parameters are intentionally absent: the engine works on
a sphere of fixed radius.

References
----------
- Mean Earth radius: IUGG, rounded to the kilometre
- Weiszfeld, E. (1937). Sur le point pour lequel la somme des distances
  de n points donnés est minimum. Tohoku Math. Journal, 43, 355-386.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A named constant with provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


class GeoConstants:
    """Registry of constants used throughout the engine.

    All constants are class attributes with full metadata. They are
    read-only; per-call tuning goes through `WeiszfeldConfig` and
    `SphereParameters` instead.

    Earth Geometry (spherical)
    --------------------------
    A single mean radius defines the sphere used for haversine distances
    and ECEF transforms.

    Solver Defaults
    ---------------
    Termination bounds for the Weiszfeld geometric median iteration.
    """

    # =========================================================================
    # Spherical Earth
    # =========================================================================

    EARTH_MEAN_RADIUS: Final[Constant] = Constant(
        value=6371.0,
        unit="km",
        source="IUGG mean radius (rounded)",
        description="Radius of the sphere used for all distance and ECEF math"
    )

    # =========================================================================
    # Weiszfeld solver defaults
    # =========================================================================

    WEISZFELD_MAX_ITERATIONS: Final[Constant] = Constant(
        value=1000,
        unit="iterations",
        source="engine default",
        description="Upper bound on Weiszfeld fixed-point iterations"
    )

    WEISZFELD_EPSILON: Final[Constant] = Constant(
        value=1e-7,
        unit="km",
        source="engine default",
        description=(
            "Convergence threshold between successive estimates, also the "
            "coincidence threshold between an estimate and an input point"
        )
    )

    # =========================================================================
    # Display
    # =========================================================================

    METERS_PER_KILOMETER: Final[Constant] = Constant(
        value=1000.0,
        unit="m per km",
        source="SI",
        description="Conversion factor from kilometres to metres"
    )
