"""
Error types raised by the critic pipeline.
"""


class CriticError(Exception):
    """Base class for all pipeline errors."""


class FormatError(CriticError, ValueError):
    """A record or its opening hours text does not match the expected format."""


class NoDataError(CriticError):
    """A summary was requested before any restaurant was reviewed."""


class InputSourceError(CriticError, ValueError):
    """The restaurant list is missing or cannot be read."""
