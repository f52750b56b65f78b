"""
Opening Hours Parser.

Converts free-text weekly opening hours such as
"ma-pe 08:00-11:30 ja 12:30-18:00, la 10:00-14:00"
into a mapping from weekday index to hours open that day.
"""

import logging
import re
from typing import Dict, List, Tuple

from critic.exceptions import FormatError
from critic.models.schedule import Weekday
import config.settings as settings

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_MINUTES_PER_DAY = 24 * 60


class OpeningHoursParser:
    """
    Parses opening hours text clause by clause.

    Grammar:
    - clauses are separated by commas: "<day range> <time spec>"
    - a day range is one abbreviation ("la") or two joined by '-' ("ma-pe")
    - a time spec is one or more "HH:MM-HH:MM" spans joined by " ja "

    Every malformed part raises FormatError; nothing is coerced to zero.
    """

    def __init__(
        self,
        clause_separator: str = settings.CLAUSE_SEPARATOR,
        span_separator: str = settings.SPAN_SEPARATOR
    ):
        self.clause_separator = clause_separator
        self.span_separator = span_separator

    def parse(self, opening_hours_text: str) -> Dict[int, float]:
        """
        Parse opening hours text.

        Later clauses overwrite earlier ones for days they cover again.

        Args:
            opening_hours_text: Raw opening hours column of a record

        Returns:
            Dict of weekday index (0=Monday) -> hours open

        Raises:
            FormatError: If the text does not match the grammar
        """
        if not opening_hours_text or not opening_hours_text.strip():
            raise FormatError("Opening hours text is empty")

        hours_by_day: Dict[int, float] = {}

        for clause in opening_hours_text.split(self.clause_separator):
            clause = clause.strip()
            if not clause:
                raise FormatError(f"Empty clause in opening hours: '{opening_hours_text.strip()}'")

            start_day, end_day, hours_open = self._parse_clause(clause)

            day = start_day
            while day <= end_day:
                hours_by_day[day] = hours_open
                day += 1

        logger.debug(f"Parsed '{opening_hours_text.strip()}' into {hours_by_day}")
        return hours_by_day

    def _parse_clause(self, clause: str) -> Tuple[int, int, float]:
        """Split one clause into (start day, end day, hours open per day)."""
        parts = clause.split(None, 1)
        if len(parts) != 2:
            raise FormatError(f"Clause '{clause}' must be '<days> <times>'")

        day_range, time_spec = parts
        start_day, end_day = self._parse_day_range(day_range)
        return start_day, end_day, self._hours_in_day(time_spec)

    def _parse_day_range(self, day_range: str) -> Tuple[int, int]:
        """Resolve "ma-pe" or "la" to (start index, end index)."""
        names = day_range.split("-")
        if len(names) == 1:
            names = names * 2
        elif len(names) != 2:
            raise FormatError(f"Invalid day range: '{day_range}'")

        try:
            start_day, end_day = (Weekday.from_abbreviation(name) for name in names)
        except KeyError as e:
            raise FormatError(f"Unknown weekday {e} in day range '{day_range}'") from None

        # No wraparound across Sunday
        if start_day > end_day:
            raise FormatError(
                f"Day range '{day_range}' runs backwards ({start_day.name} after {end_day.name})"
            )

        return int(start_day), int(end_day)

    def _hours_in_day(self, time_spec: str) -> float:
        """Sum the durations of all spans in a time spec, in hours."""
        spans = self._split_spans(time_spec)

        total_minutes = 0
        for opens, closes in spans:
            if closes < opens:
                raise FormatError(f"Closing time before opening time in '{time_spec.strip()}'")
            total_minutes += closes - opens

        return total_minutes / 60

    def _split_spans(self, time_spec: str) -> List[Tuple[int, int]]:
        spans = []
        for span in time_spec.split(self.span_separator):
            times = span.strip().split("-")
            if len(times) != 2:
                raise FormatError(f"Invalid time span: '{span.strip()}'")
            spans.append((_time_to_minutes(times[0]), _time_to_minutes(times[1])))
        return spans


def _time_to_minutes(time_text: str) -> int:
    """
    '09:30' -> 570
    '24:00' -> 1440 (closing at midnight)
    """
    m = _TIME_PATTERN.match(time_text.strip())
    if not m:
        raise FormatError(f"Invalid time: '{time_text.strip()}'. Expected HH:MM")

    hours = int(m.group(1))
    minutes = int(m.group(2))
    total = hours * 60 + minutes

    if minutes > 59 or total > _MINUTES_PER_DAY:
        raise FormatError(f"Time out of range: '{time_text.strip()}'")

    return total
