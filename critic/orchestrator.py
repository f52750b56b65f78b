"""
Pipeline Orchestrator.

Runs the restaurant list through ingestion, rating and comparison,
and optionally exports the review table.
"""

import logging
from contextlib import closing
from pathlib import Path
from typing import Optional, Union

from critic.agents.ingestion import IngestionAgent
from critic.agents.rating import RestaurantCritic
from critic.agents.reporting import ReviewTableBuilder
from critic.exceptions import FormatError
from critic.utils.storage import StorageManager
import config.settings as settings

logger = logging.getLogger(__name__)


class ReviewPipeline:
    """
    Orchestrates a single review run.

    Coordinates:
    1. Ingestion → 2. Schedule parsing and rating → 3. Comparison

    After all records: Summary (and optional review table export)
    """

    def __init__(
        self,
        ingestion_agent: Optional[IngestionAgent] = None,
        critic: Optional[RestaurantCritic] = None,
        continue_on_record_failure: bool = settings.CONTINUE_ON_RECORD_FAILURE
    ):
        """
        Initialize review pipeline.

        Args:
            ingestion_agent: Reader for the restaurant list
            critic: Rating and comparison engine
            continue_on_record_failure: Skip malformed records instead of aborting
        """
        self.ingestion_agent = ingestion_agent or IngestionAgent()
        self.critic = critic or RestaurantCritic()
        self.continue_on_record_failure = continue_on_record_failure
        self.skipped_records = 0

    def run(
        self,
        input_path: Union[str, Path],
        export_dir: Optional[Union[str, Path]] = None
    ) -> str:
        """
        Review every restaurant in the list.

        Args:
            input_path: Path to the semicolon-delimited restaurant list
            export_dir: If given, write the review table and metadata here

        Returns:
            Two-line summary of favorite and least favorite restaurant

        Raises:
            InputSourceError: If the list is missing or unreadable
            FormatError: On a malformed record, unless continue_on_record_failure
            NoDataError: If no restaurant could be reviewed
        """
        logger.info(f"Starting review of {input_path}")

        self.skipped_records = 0
        reviewed = 0

        with closing(self.ingestion_agent.read_lines(input_path)) as lines:
            for line_number, line in lines:
                try:
                    record = self.ingestion_agent.parse_line(line)
                    restaurant = self.critic.ingest(record)
                except FormatError as e:
                    logger.error(f"Failed to review line {line_number}: {e}")
                    if self.continue_on_record_failure:
                        logger.warning("Skipping record and continuing")
                        self.skipped_records += 1
                        continue
                    raise FormatError(f"Line {line_number}: {e}") from e

                self.critic.compare(restaurant)
                reviewed += 1

        logger.info(f"Reviewed {reviewed} restaurants ({self.skipped_records} skipped)")

        summary = self.critic.summarize()

        if export_dir is not None:
            builder = ReviewTableBuilder(StorageManager(export_dir))
            output_path = builder.export(
                restaurants=self.critic.restaurants,
                run_name=Path(input_path).stem,
                summary=self.critic.summary,
                source=str(input_path),
                skipped_records=self.skipped_records
            )
            logger.info(f"Review table: {output_path}")

        return summary
