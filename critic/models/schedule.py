"""
Weekday schedule model.

Weekday enumeration, the fixed abbreviation table, and the immutable
per-restaurant mapping of weekday index to hours open.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Mapping


class Weekday(IntEnum):
    """Days of the week, Monday first."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def abbreviation(self) -> str:
        return WEEKDAY_ABBREVIATIONS[self]

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> "Weekday":
        """
        Look up a weekday by its two-letter abbreviation (case-insensitive).

        Raises:
            KeyError: If the abbreviation is unknown
        """
        return _ABBREVIATION_TO_WEEKDAY[abbreviation.strip().lower()]


WEEKDAY_ABBREVIATIONS = {
    Weekday.MONDAY: "ma",
    Weekday.TUESDAY: "ti",
    Weekday.WEDNESDAY: "ke",
    Weekday.THURSDAY: "to",
    Weekday.FRIDAY: "pe",
    Weekday.SATURDAY: "la",
    Weekday.SUNDAY: "su",
}

_ABBREVIATION_TO_WEEKDAY = {abbr: day for day, abbr in WEEKDAY_ABBREVIATIONS.items()}


# weekday index (0-6) -> hours open that day
WeekdaySchedule = Mapping[int, float]


def freeze_schedule(hours_by_day: Dict[int, float]) -> WeekdaySchedule:
    """
    Validate a weekday -> hours mapping and return a read-only copy.

    Raises:
        ValueError: If a key is outside 0-6 or a value is negative
    """
    for day, hours in hours_by_day.items():
        if day not in range(len(Weekday)):
            raise ValueError(f"Invalid weekday index: {day}. Must be 0-6")
        if hours < 0:
            raise ValueError(f"Invalid hours for weekday {day}: {hours}. Must be non-negative")

    return MappingProxyType(dict(sorted(hours_by_day.items())))
