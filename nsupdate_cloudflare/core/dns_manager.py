"""
DNS Manager - Replays nsupdate batches against the DNS provider

This module drives the whole run: it splits nsupdate text into batches,
snapshots the zone once per batch and applies each add/delete in order,
keeping a processed/failed tally per batch and for the run.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..exceptions import ProviderError
from ..models import Tally
from ..parsers.nsupdate import parse_text
from ..providers.dns_client import DNSClient
from .record_cache import CurrentRecords
from .record_manager import AddRequest, DeleteRequest, Request, RequestQueue

logger = logging.getLogger(__name__)


class RequestOutcome(enum.Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    NOT_FOUND = "NOT FOUND"


@dataclass
class BatchReport:
    """What happened to one send-delimited batch."""

    number: int
    commands: int
    send: bool
    tally: Optional[Tally] = None
    requests: List[Request] = field(default_factory=list)


@dataclass
class RunSummary:
    batches: List[BatchReport] = field(default_factory=list)

    @property
    def total(self) -> Tally:
        return sum((b.tally for b in self.batches if b.tally is not None), Tally())


class DNSManager:
    """Main DNS management class that orchestrates the entire process."""

    def __init__(
        self,
        config: Optional[Dict] = None,
        dns_client: Optional[DNSClient] = None,
        log: Optional[logging.Logger] = None,
    ):
        """Initialize the DNS manager with configuration or a ready client."""
        self.config = config or {}
        self.dns_client = dns_client or DNSClient(self.config)
        self.log = log or logger

    def execute(self, text: str, zone: str, dry_run: bool = False) -> RunSummary:
        """
        Replay every batch in nsupdate text against the zone.

        Batches are parsed and applied one after another; a batch without a
        closing ``send`` is skipped.

        Args:
            text: Full nsupdate input
            zone: Provider zone identifier
            dry_run: Translate and log requests without contacting the provider

        Returns:
            RunSummary with one report per batch

        Raises:
            ParseError: If a line is malformed
            FetchError: If the current records cannot be fetched
        """
        summary = RunSummary()
        remaining: Optional[str] = text
        line_number = 1

        while remaining is not None:
            batch, remaining = parse_text(remaining, line_number)
            line_number += batch.lines_consumed
            report = BatchReport(
                number=len(summary.batches) + 1, commands=len(batch), send=batch.has_send()
            )
            summary.batches.append(report)
            self.log.info(f"{report.commands} commands in batch {report.number}")
            self.log.debug(f"Parse result: {batch!r}")

            if not batch.has_send():
                self.log.info('No "send" command found, nothing to do...')
                continue

            queue = RequestQueue.from_batch(batch)
            report.requests = list(queue)
            if dry_run:
                for request in queue:
                    self.log.info(f"DRY RUN: would {_describe(request)}")
                continue

            report.tally = self.process(queue, zone)
            self.log.info(
                f"Batch {report.number} Subtotal: Processed {report.tally.processed} "
                f"requests, {report.tally.failed} failed"
            )

        total = summary.total
        self.log.info(
            f"Processed {total.processed} requests in total, {total.failed} failed"
        )
        return summary

    def process(self, queue: RequestQueue, zone: str) -> Tally:
        """
        Apply one batch of requests in order against a single zone snapshot.

        Deletions are resolved against the records that existed before the
        batch started, so a record added earlier in the same batch cannot be
        deleted by it.

        Raises:
            FetchError: If the current records cannot be fetched; nothing is applied
        """
        current_records = CurrentRecords(self.dns_client)
        current_records.refresh(zone)

        processed = 0
        failed = 0
        for request in queue.take():
            outcome = self._apply(request, zone, current_records)
            processed += 1
            if outcome is not RequestOutcome.SUCCESS:
                failed += 1
            self.log.info(f"Result: {outcome.value}")

        return Tally(processed, failed)

    def _apply(
        self, request: Request, zone: str, current_records: CurrentRecords
    ) -> RequestOutcome:
        """Send one request and classify the provider's answer."""
        try:
            if isinstance(request, AddRequest):
                self.log.info(f"Adding {request.name}")
                response = self.dns_client.create_record(zone, request.to_payload())
            else:
                self.log.info(f"Deleting {request.name}")
                record_id = current_records.find_id(request.name, request.record_type)
                self.log.debug(f"Record ID: {record_id}, domain: {request.name}")
                if record_id is None:
                    self.log.warning(
                        f"Record not found: {request.name} {request.record_type}"
                    )
                    return RequestOutcome.NOT_FOUND
                response = self.dns_client.delete_record(zone, record_id)
        except ProviderError as e:
            self.log.error(f"Failed to {_describe(request)}: {e}")
            return RequestOutcome.FAILED

        self.log.debug(f"Result: {response}")
        if response.get("success"):
            return RequestOutcome.SUCCESS

        self.log.error(f"Failed to {_describe(request)}: {response.get('errors', [])}")
        return RequestOutcome.FAILED


def _describe(request: Request) -> str:
    if isinstance(request, DeleteRequest):
        return f"delete {request.name} {request.record_type}"
    priority = f" {request.priority}" if request.priority is not None else ""
    return f"add {request.name} {request.ttl} {request.record_type}{priority} {request.content}"
