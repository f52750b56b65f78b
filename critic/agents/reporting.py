"""
Review Table Builder.

Tabulates every reviewed restaurant with its hours per weekday,
total weekly hours and stars, and exports the table.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pandas as pd

from critic.models.restaurant import Restaurant, ReviewSummary
from critic.models.schedule import Weekday
from critic.utils.storage import StorageManager

logger = logging.getLogger(__name__)

DAY_COLUMNS = [day.abbreviation for day in Weekday]
TABLE_COLUMNS = ["Id", "Name", "PostalCode", "City"] + DAY_COLUMNS + ["Total", "Stars"]


class ReviewTableBuilder:
    """
    Builds and exports the review table.
    """

    def __init__(self, storage: StorageManager):
        """
        Initialize review table builder.

        Args:
            storage: Storage manager used for exports
        """
        self.storage = storage

    def build_table(self, restaurants: List[Restaurant]) -> pd.DataFrame:
        """
        Build one row per restaurant, most open first.

        Days missing from a schedule are 0.0. Restaurants with equal totals
        keep their input order.
        """
        rows = []
        for restaurant in restaurants:
            row = {
                "Id": restaurant.restaurant_id,
                "Name": restaurant.name,
                "PostalCode": restaurant.postal_code,
                "City": restaurant.city,
            }
            for day in Weekday:
                row[day.abbreviation] = float(restaurant.schedule.get(int(day), 0.0))
            row["Total"] = restaurant.total_hours
            row["Stars"] = restaurant.stars if restaurant.stars is not None else 0
            rows.append(row)

        if not rows:
            logger.warning("No restaurants to tabulate, creating empty review table")
            return pd.DataFrame(columns=TABLE_COLUMNS)

        table = pd.DataFrame(rows, columns=TABLE_COLUMNS)
        table = table.sort_values("Total", ascending=False, kind="stable").reset_index(drop=True)

        logger.info(f"Built review table with {len(table)} restaurants")
        return table

    def export(
        self,
        restaurants: List[Restaurant],
        run_name: str,
        summary: Optional[ReviewSummary] = None,
        source: str = "",
        skipped_records: int = 0
    ) -> str:
        """
        Save the review table and its metadata.

        Args:
            restaurants: Reviewed restaurants in input order
            run_name: Name used in the output file names
            summary: Favorite / least favorite, recorded in metadata
            source: Input file the restaurants came from
            skipped_records: Number of malformed records skipped

        Returns:
            Path to generated CSV file
        """
        table = self.build_table(restaurants)
        output_path = self.storage.save_review_table(table, run_name)

        metadata = self._build_metadata(restaurants, summary, source, skipped_records)
        self.storage.save_metadata(metadata, run_name)

        return output_path

    def _build_metadata(
        self,
        restaurants: List[Restaurant],
        summary: Optional[ReviewSummary],
        source: str,
        skipped_records: int
    ) -> Dict:
        favorite = summary.favorite if summary else None
        least_favorite = summary.least_favorite if summary else None

        return {
            "source": source,
            "restaurants": len(restaurants),
            "skipped_records": skipped_records,
            "favorite": favorite.name if favorite else None,
            "least_favorite": least_favorite.name if least_favorite else None,
            "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        }
