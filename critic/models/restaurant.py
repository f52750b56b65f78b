"""
Restaurant data models.

Raw records as read from the restaurant list, reviewed restaurants,
and the running favorite / least favorite summary.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from critic.models.schedule import WeekdaySchedule, freeze_schedule


@dataclass(frozen=True)
class RawRecord:
    """
    One line of the restaurant list split into its columns.
    Discarded once the restaurant has been reviewed.
    """
    restaurant_id: str
    name: str
    postal_code: str
    city: str
    opening_hours: str  # e.g. "ma-pe 09:00-17:00, la-su 10:00-14:00"


@dataclass
class Restaurant:
    """
    A reviewed restaurant.
    Stars stay None until the rating engine has reviewed it.
    """
    name: str
    schedule: WeekdaySchedule = field(default_factory=dict)
    stars: Optional[int] = None
    restaurant_id: str = ""
    postal_code: str = ""
    city: str = ""

    def __post_init__(self):
        self.schedule = freeze_schedule(dict(self.schedule))

        if self.stars is not None and self.stars < 0:
            raise ValueError(f"Invalid stars: {self.stars}. Must be non-negative")

    @property
    def total_hours(self) -> float:
        """Weekly open hours. Days missing from the schedule count as zero."""
        return math.fsum(self.schedule.values())

    def star_glyphs(self, glyph: str = "*") -> str:
        return glyph * (self.stars or 0)

    def is_open_longer_than(self, other: "Restaurant") -> bool:
        return self.total_hours > other.total_hours

    def is_open_less_than(self, other: "Restaurant") -> bool:
        return self.total_hours < other.total_hours


@dataclass(frozen=True)
class ReviewSummary:
    """Most and least open restaurants seen so far."""
    favorite: Optional[Restaurant] = None
    least_favorite: Optional[Restaurant] = None

    @property
    def is_empty(self) -> bool:
        return self.favorite is None
