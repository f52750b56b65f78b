"""
Rating and Comparison Engine.

Reviews restaurants one at a time, assigns stars from weekly open hours,
and keeps track of the most and least open restaurant.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from critic.agents.schedule_parser import OpeningHoursParser
from critic.exceptions import NoDataError
from critic.models.restaurant import RawRecord, Restaurant, ReviewSummary
import config.settings as settings

logger = logging.getLogger(__name__)


def compare_restaurants(summary: ReviewSummary, candidate: Restaurant) -> ReviewSummary:
    """
    Return the summary updated with a newly reviewed restaurant.

    The first restaurant seeds both ends. After that a candidate open
    strictly longer than the favorite replaces the favorite; otherwise,
    one open strictly less than the least favorite replaces that one.
    Ties replace neither.

    Note: the two checks are exclusive. A candidate that beats the
    favorite is never considered for least favorite in the same step.
    """
    if summary.is_empty:
        return ReviewSummary(favorite=candidate, least_favorite=candidate)

    if summary.favorite.is_open_less_than(candidate):
        return ReviewSummary(favorite=candidate, least_favorite=summary.least_favorite)
    elif summary.least_favorite.is_open_longer_than(candidate):
        return ReviewSummary(favorite=summary.favorite, least_favorite=candidate)

    return summary


class RestaurantCritic:
    """
    Likes restaurants that are open longer and gives stars accordingly.

    Usage:
        critic = RestaurantCritic()
        for record in records:
            critic.compare(critic.ingest(record))
        print(critic.summarize())
    """

    def __init__(
        self,
        parser: Optional[OpeningHoursParser] = None,
        hours_per_star: int = settings.HOURS_PER_STAR,
        star_glyph: str = settings.STAR_GLYPH
    ):
        """
        Initialize restaurant critic.

        Args:
            parser: Opening hours parser (default: OpeningHoursParser())
            hours_per_star: Weekly open hours needed for each star
            star_glyph: Character repeated once per star in the summary
        """
        if hours_per_star <= 0:
            raise ValueError(f"Invalid hours_per_star: {hours_per_star}. Must be positive")

        self.parser = parser or OpeningHoursParser()
        self.hours_per_star = hours_per_star
        self.star_glyph = star_glyph
        self.summary = ReviewSummary()
        self.restaurants: List[Restaurant] = []

    def ingest(self, record: RawRecord) -> Restaurant:
        """
        Review one restaurant record.

        Args:
            record: Raw record from the restaurant list

        Returns:
            Restaurant with its schedule and stars set

        Raises:
            FormatError: If the opening hours cannot be parsed
        """
        schedule = self.parser.parse(record.opening_hours)

        unrated = Restaurant(
            name=record.name,
            schedule=schedule,
            restaurant_id=record.restaurant_id,
            postal_code=record.postal_code,
            city=record.city
        )
        restaurant = replace(unrated, stars=self.rate(unrated.total_hours))
        self.restaurants.append(restaurant)

        logger.debug(
            f"Reviewed {restaurant.name}: {restaurant.total_hours:.2f} hours, "
            f"{restaurant.stars} stars"
        )
        return restaurant

    def rate(self, total_hours: float) -> int:
        """Stars = floor(total_hours / hours_per_star)."""
        return int(total_hours // self.hours_per_star)

    def compare(self, restaurant: Restaurant) -> ReviewSummary:
        """Update the favorite / least favorite with a reviewed restaurant."""
        previous = self.summary
        self.summary = compare_restaurants(previous, restaurant)

        if self.summary.favorite is not previous.favorite and not previous.is_empty:
            logger.info(f"New favorite: {restaurant.name} ({restaurant.total_hours:.2f} hours)")
        elif self.summary.least_favorite is not previous.least_favorite and not previous.is_empty:
            logger.info(f"New least favorite: {restaurant.name} ({restaurant.total_hours:.2f} hours)")

        return self.summary

    def summarize(self) -> str:
        """
        Render the two-line review.

        Returns:
            "My favorite: <name><stars>, open <hours> hours a week" followed by
            the same line for the least favorite. Hours are truncated.

        Raises:
            NoDataError: If no restaurant has been compared yet
        """
        if self.summary.is_empty:
            raise NoDataError("No restaurants reviewed, nothing to publish")

        return "\n".join([
            self._review_line("My favorite", self.summary.favorite),
            self._review_line("My least favorite", self.summary.least_favorite),
        ])

    def _review_line(self, label: str, restaurant: Restaurant) -> str:
        return (
            f"{label}: {restaurant.name}{restaurant.star_glyphs(self.star_glyph)}, "
            f"open {int(restaurant.total_hours)} hours a week"
        )
