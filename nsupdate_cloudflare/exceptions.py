"""
Exceptions raised by nsupdate-cloudflare.

Only parse and fetch failures are meant to reach the process boundary.
Individual add/delete failures are recorded in the batch tally instead.
"""

from typing import Dict, List, Optional


class NSUpdateError(Exception):
    """Base class for all nsupdate-cloudflare errors."""


class ParseError(NSUpdateError, ValueError):
    """A line of nsupdate text matched none of the grammar productions."""

    def __init__(self, message: str, line_number: int, column: int = 1, line: str = ""):
        self.message = message
        self.line_number = line_number
        self.column = column
        self.line = line
        super().__init__(f"Line {line_number}, column {column}: {message}: {line.strip()!r}")


class ProviderError(NSUpdateError):
    """The DNS provider could not be reached or returned an undecodable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class FetchError(NSUpdateError):
    """Fetching the current record list from the provider failed."""

    def __init__(self, message: str, errors: Optional[List[Dict]] = None):
        self.errors = errors or []
        super().__init__(message)
