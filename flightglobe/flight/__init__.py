"""
Flight Module
=============

Looping great-circle flight animation and display helpers.

Classes
-------
FlightLeg
    Endpoints and schedule of one flight
FlightProgress
    Ratio and simulated instant for one animation tick
FlightTracker
    Animation clock -> looping flight progress

Functions
---------
offset_hours, timezone_offset_label
    Whole-hour UTC offset derived from longitude
local_time_string
    Human-readable local time at a longitude
"""

from flightglobe.flight.tracker import (
    FlightLeg,
    FlightProgress,
    FlightTracker,
)
from flightglobe.flight.timezone import (
    offset_hours,
    timezone_offset_label,
    local_time_string,
)

__all__ = [
    "FlightLeg",
    "FlightProgress",
    "FlightTracker",
    "offset_hours",
    "timezone_offset_label",
    "local_time_string",
]
