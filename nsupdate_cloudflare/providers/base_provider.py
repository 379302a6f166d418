"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
Providers speak the Cloudflare v4 response envelope:
``{"success": bool, "errors": [...], "messages": [...], "result": ..., "result_info": {...}}``.
"""

from abc import ABC, abstractmethod
from typing import Dict


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_records(self, zone: str, page: int = 1, per_page: int = 1000) -> Dict:
        """Get one page of DNS records for a zone."""
        pass

    @abstractmethod
    def create_record(self, zone: str, payload: Dict) -> Dict:
        """Create a new DNS record."""
        pass

    @abstractmethod
    def delete_record(self, zone: str, record_id: str) -> Dict:
        """Delete a DNS record by its provider-assigned ID."""
        pass
