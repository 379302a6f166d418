"""
Current-record cache.

Holds one snapshot of the zone's records, fetched page by page before a
batch is applied, and resolves record IDs for deletions against it.
"""

import logging
from typing import Dict, List, Optional

from ..exceptions import FetchError, ProviderError
from ..models import ProviderRecord

logger = logging.getLogger(__name__)


class CurrentRecords:
    """Snapshot of the records currently stored by the provider."""

    def __init__(self, dns_client, per_page: int = 1000):
        self.dns_client = dns_client
        self.per_page = per_page
        self.records: List[ProviderRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def refresh(self, zone: str) -> None:
        """
        Replace the snapshot with every record currently in the zone.

        Raises:
            FetchError: If any page cannot be fetched or the provider reports failure
        """
        logger.info("Updating record list")
        self.records = []

        first_page = self._fetch_page(zone, 1)
        try:
            total_pages = int((first_page.get("result_info") or {}).get("total_pages", 1))
        except (TypeError, ValueError) as e:
            raise FetchError(f"Invalid page count in records response: {e}") from e
        self._append(first_page)

        for page in range(2, total_pages + 1):
            self._append(self._fetch_page(zone, page))

        logger.info(f"Received {len(self.records)} records")

    def _fetch_page(self, zone: str, page: int) -> Dict:
        try:
            envelope = self.dns_client.list_records(zone, page, self.per_page)
        except ProviderError as e:
            raise FetchError(f"Failed to request records page {page}: {e}") from e

        if not envelope.get("success"):
            errors = envelope.get("errors", [])
            raise FetchError(
                f"Failed to request records from Cloudflare: {errors}", errors=errors
            )
        return envelope

    def _append(self, envelope: Dict):
        try:
            page_records = [
                ProviderRecord.from_api(item) for item in envelope.get("result") or []
            ]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FetchError(f"Invalid record in records response: {e!r}") from e
        logger.debug(f">>> Appending: {page_records}")
        self.records.extend(page_records)

    def find_id(self, name: str, record_type: str) -> Optional[str]:
        """
        Find the ID of the first record matching name and type.

        The provider stores names without the trailing dot, so a dot is
        appended to each stored name before comparing.

        Args:
            name: Dot-terminated domain name from the input
            record_type: Exact record type

        Returns:
            The record ID, or None if nothing matches
        """
        if not self.records:
            return None

        logger.debug("Finding record ID")
        for record in self.records:
            if f"{record.name}." == name and record.record_type == record_type:
                return record.id
        return None
