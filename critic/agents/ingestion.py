"""
Ingestion Agent.

Reads the semicolon-delimited restaurant list and yields raw records
in input order.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from critic.exceptions import FormatError, InputSourceError
from critic.models.restaurant import RawRecord
import config.settings as settings

logger = logging.getLogger(__name__)


class IngestionAgent:
    """
    Reads restaurant records from a file.

    Each line has the form:
        id;name;postalCode;city;openingHoursText

    Blank lines are skipped. Columns after the fifth are ignored.
    """

    def __init__(
        self,
        delimiter: str = settings.RECORD_DELIMITER,
        encoding: str = settings.INPUT_ENCODING
    ):
        """
        Initialize ingestion agent.

        Args:
            delimiter: Column separator
            encoding: Text encoding of the input file
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def read_lines(self, path: Union[str, Path]) -> Iterator[Tuple[int, str]]:
        """
        Iterate (line number, line) for the non-blank lines of a file.

        The source is checked before this returns. The file is opened on
        the first item and closed once the iterator is exhausted, fails
        or is closed.

        Args:
            path: Path to the restaurant list

        Raises:
            InputSourceError: If the file does not exist or cannot be read,
                or (while iterating) is not valid text in the configured encoding
        """
        path = Path(path)
        self._check_source(path)

        logger.info(f"Reading restaurant list from {path}")
        return self._iter_lines(path)

    def read_records(self, path: Union[str, Path]) -> Iterator[RawRecord]:
        """
        Iterate one RawRecord per non-blank line.

        Raises:
            InputSourceError: If the file does not exist or cannot be read
            FormatError: If a line has too few columns (while iterating)
        """
        lines = self.read_lines(path)
        return (self.parse_line(line, line_number) for line_number, line in lines)

    def _iter_lines(self, path: Path) -> Iterator[Tuple[int, str]]:
        try:
            handle = open(path, "r", encoding=self.encoding)
        except OSError as e:
            raise InputSourceError(f"Unable to read restaurant list from '{path}': {e}") from e

        with handle:
            try:
                for line_number, line in enumerate(handle, start=1):
                    if not line.strip():
                        logger.debug(f"Skipping blank line {line_number}")
                        continue
                    yield line_number, line
            except UnicodeDecodeError as e:
                raise InputSourceError(f"'{path}' is not valid {self.encoding} text: {e}") from e

    def parse_line(self, line: str, line_number: Optional[int] = None) -> RawRecord:
        """
        Split one input line into its columns.

        Raises:
            FormatError: If the line has fewer than five columns
        """
        values = [value.strip() for value in line.rstrip("\r\n").split(self.delimiter)]
        expected = len(settings.RECORD_COLUMNS)

        if len(values) < expected:
            where = f"Line {line_number}: " if line_number is not None else ""
            raise FormatError(
                f"{where}Expected {expected} columns separated by '{self.delimiter}', got {len(values)}"
            )

        return RawRecord(*values[:expected])

    def _check_source(self, path: Path) -> None:
        if not path.is_file():
            raise InputSourceError(f"Non-existing or unreadable file '{path}'")
        if not os.access(path, os.R_OK):
            raise InputSourceError(f"Non-existing or unreadable file '{path}'")
