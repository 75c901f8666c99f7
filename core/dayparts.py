"""
dayparts.py — Time-of-Day Buckets
---------------------------------

Classifies a detection timestamp into one of four fixed day-parts using the
local wall-clock hour:

- morning:   06:00–11:59
- afternoon: 12:00–17:59
- evening:   18:00–23:59
- night:     00:00–05:59

Project: Glaucus Fish Identification
"""

from datetime import datetime
from enum import Enum


class DayPart(str, Enum):
    """Day-parts in canonical order (used for tie-breaks and chart axes)."""
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


def daypart_for_hour(hour: int) -> DayPart:
    if not 0 <= hour < 24:
        raise ValueError(f"Hour out of range: {hour}")
    if 6 <= hour < 12:
        return DayPart.MORNING
    elif 12 <= hour < 18:
        return DayPart.AFTERNOON
    elif 18 <= hour < 24:
        return DayPart.EVENING
    else:
        return DayPart.NIGHT


def bucketize(epoch_seconds: int) -> DayPart:
    """
    Day-part for an epoch timestamp, using the local hour.
    """
    return daypart_for_hour(datetime.fromtimestamp(epoch_seconds).hour)
