"""
Unit Handling for Distances.

The engine computes distances as bare floats in kilometres. This module
attaches units with the `pint` library where a caller needs them, and
renders distances for display.

Example Usage
-------------
>>> from common.units import convert_distance, format_distance
>>> convert_distance(1.5, "m")
1500.0
>>> format_distance(0.85)
'850 m'
>>> format_distance(402.34)
'402.3 km'
"""

from typing import Union
import math

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.constants import GeoConstants

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

DISTANCE_UNIT = "kilometer"


def distance_quantity(km: float) -> pint.Quantity:
    """Wrap a kilometre distance as a pint quantity."""
    return Q_(km, DISTANCE_UNIT)


def convert_distance(distance: Union[float, pint.Quantity], unit: str) -> float:
    """Convert a distance to another length unit.

    Parameters
    ----------
    distance : float or pint.Quantity
        Distance. Bare numbers are taken as kilometres.
    unit : str
        Target unit (e.g., 'm', 'mile', 'nautical_mile').

    Returns
    -------
    float
        Magnitude in the target unit.

    Raises
    ------
    pint.DimensionalityError
        If the target unit is not a length.
    """
    if not isinstance(distance, pint.Quantity):
        distance = distance_quantity(distance)
    return float(distance.to(unit).magnitude)


def format_distance(km: float) -> str:
    """Render a distance for display.

    Distances below one kilometre are shown in whole metres, everything
    else in kilometres with one decimal.

    Parameters
    ----------
    km : float
        Distance in kilometres.

    Returns
    -------
    str
        e.g. '850 m' or '402.3 km'.
    """
    if km < 1:
        meters = km * GeoConstants.METERS_PER_KILOMETER.value
        # Round half up
        return f"{int(math.floor(meters + 0.5))} m"
    return f"{km:.1f} km"
