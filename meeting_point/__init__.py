"""
Meeting-Point Module.

Assembles the aggregates into the result consumed by the display layer.
"""

from meeting_point.result import (
    LocationDistances,
    MeetingPointResult,
    MeetingPointCalculator,
    compute_meeting_point,
)

__all__ = [
    "LocationDistances",
    "MeetingPointResult",
    "MeetingPointCalculator",
    "compute_meeting_point",
]
