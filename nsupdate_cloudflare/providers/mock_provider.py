"""
Mock DNS provider for testing and dry runs.

This module provides a mock DNS provider that stores records in memory and
answers with the same response envelopes as the Cloudflare API.
"""

import logging
import math
import uuid
from typing import Dict, List

from .base_provider import DNSProvider
from ..utils.validators import sanitize_fqdn

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider, optionally seeded with ``records``."""
        config = config or {}
        self.max_per_page = config.get("max_per_page", 1000)
        self.records: List[Dict] = []
        self.calls: List[tuple] = []

        for record in config.get("records", []):
            self._store(record)

        logger.info(f"Mock DNS provider initialized with {len(self.records)} records")

    def _store(self, payload: Dict) -> Dict:
        record = {
            "id": payload.get("id") or uuid.uuid4().hex,
            "type": payload["type"],
            "name": sanitize_fqdn(payload["name"]),
            "content": payload["content"],
            "ttl": payload.get("ttl", 1),
            "proxied": payload.get("proxied", False),
            "locked": False,
        }
        if payload.get("priority") is not None:
            record["priority"] = payload["priority"]
        self.records.append(record)
        return record

    @staticmethod
    def _envelope(result, success: bool = True, errors: List[Dict] = None) -> Dict:
        return {
            "success": success,
            "errors": errors or [],
            "messages": [],
            "result": result,
        }

    def list_records(self, zone: str, page: int = 1, per_page: int = 1000) -> Dict:
        """Get one page of DNS records for a zone."""
        self.calls.append(("list_records", zone, page))
        per_page = min(per_page, self.max_per_page)
        start = (page - 1) * per_page
        result = [record.copy() for record in self.records[start:start + per_page]]

        envelope = self._envelope(result)
        envelope["result_info"] = {
            "page": page,
            "per_page": per_page,
            "count": len(result),
            "total_count": len(self.records),
            "total_pages": math.ceil(len(self.records) / per_page),
        }
        logger.info(f"Mock: Retrieved {len(result)} records from page {page}")
        return envelope

    def create_record(self, zone: str, payload: Dict) -> Dict:
        """Create a new DNS record."""
        self.calls.append(("create_record", zone, payload))
        record = self._store(payload)
        logger.info(f"Mock: Created {record['type']} record {record['name']}")
        return self._envelope(record.copy())

    def delete_record(self, zone: str, record_id: str) -> Dict:
        """Delete a DNS record by its provider-assigned ID."""
        self.calls.append(("delete_record", zone, record_id))
        for i, existing in enumerate(self.records):
            if existing["id"] == record_id:
                del self.records[i]
                logger.info(f"Mock: Deleted record {existing['name']}")
                return self._envelope({"id": record_id})

        return self._envelope(
            None,
            success=False,
            errors=[{"code": 81044, "message": "Record does not exist."}],
        )
