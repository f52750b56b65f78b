"""
Storage utility.

File I/O helpers for exported review tables and their metadata.
"""

import json
import os
import logging
from typing import Dict

import pandas as pd

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Manages file I/O for review exports.

    Handles:
    - Review tables (<output_root>/review_<run>.csv)
    - Review metadata (<output_root>/review_<run>_metadata.json)
    """

    def __init__(self, output_root: str):
        """
        Initialize storage manager.

        Args:
            output_root: Directory for exported files (created if missing)
        """
        self.output_root = str(output_root)
        os.makedirs(self.output_root, exist_ok=True)

        logger.info(f"Initialized StorageManager with output_root={self.output_root}")

    def table_path(self, run_name: str) -> str:
        return os.path.join(self.output_root, f"review_{run_name}.csv")

    def metadata_path(self, run_name: str) -> str:
        return os.path.join(self.output_root, f"review_{run_name}_metadata.json")

    def save_review_table(self, table: pd.DataFrame, run_name: str) -> str:
        """
        Save review table as CSV.

        Args:
            table: Review table (see reporting.py for columns)
            run_name: Name used in the output file name

        Returns:
            Path to the written CSV
        """
        filepath = self.table_path(run_name)

        try:
            table.to_csv(filepath, index=False)
            logger.info(f"Saved review table with {len(table)} restaurants to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save review table for {run_name}: {e}")
            raise

        return filepath

    def save_metadata(self, metadata: Dict, run_name: str) -> str:
        """
        Save review metadata as JSON.

        Returns:
            Path to the written JSON file
        """
        filepath = self.metadata_path(run_name)

        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(metadata, f, indent=2, ensure_ascii=False)
            logger.info(f"Saved review metadata to {filepath}")
        except Exception as e:
            logger.error(f"Failed to save review metadata for {run_name}: {e}")
            raise

        return filepath
