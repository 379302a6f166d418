"""
Core nsupdate replay functionality.

This package contains the request translation, the current-record cache and
the reconciliation engine that applies batches to the provider.
"""

from .dns_manager import BatchReport, DNSManager, RequestOutcome, RunSummary
from .record_cache import CurrentRecords
from .record_manager import AddRequest, DeleteRequest, RequestQueue, translate_action

__all__ = [
    "AddRequest",
    "BatchReport",
    "CurrentRecords",
    "DNSManager",
    "DeleteRequest",
    "RequestOutcome",
    "RequestQueue",
    "RunSummary",
    "translate_action",
]
