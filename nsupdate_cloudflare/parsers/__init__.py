"""
nsupdate text parsers.

This package contains the line grammar and the batch builder that splits
an nsupdate file into ``send``-delimited batches.
"""

from .grammar import parse_line
from .nsupdate import NSUpdateQueue, parse_text

__all__ = ["NSUpdateQueue", "parse_line", "parse_text"]
