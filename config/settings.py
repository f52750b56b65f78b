"""
Configuration settings for Restaurant Critic.

Centralized configuration for the reader, the rating engine and the CLI.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_ROOT = Path(os.getenv("CRITIC_OUTPUT_ROOT", str(PROJECT_ROOT / "output")))

# Input format
RECORD_DELIMITER = ";"
RECORD_COLUMNS = ["id", "name", "postal_code", "city", "opening_hours"]
INPUT_ENCODING = "utf-8"

# Opening hours grammar
CLAUSE_SEPARATOR = ","
SPAN_SEPARATOR = " ja "

# Rating
HOURS_PER_STAR = 10
STAR_GLYPH = "*"

# Pipeline Configuration
CONTINUE_ON_RECORD_FAILURE = False  # Malformed lines abort the run unless --skip-invalid

# Logging
LOG_LEVEL = os.getenv("CRITIC_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "critic.log"
