"""
DNS Client - Entry point to the configured DNS provider

This module selects the provider named in the configuration, currently
Cloudflare or the in-memory mock, and forwards record operations to it.
"""

import logging
from typing import Dict

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider

logger = logging.getLogger(__name__)


class DNSClient:
    """DNS client wrapping the configured provider."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = (self.config.get("dns_providers") or {}).get(provider_name) or {}

        if provider_name == "cloudflare":
            return CloudflareProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockDNSProvider()

    def list_records(self, zone: str, page: int = 1, per_page: int = 1000) -> Dict:
        """Get one page of DNS records for a zone."""
        return self.provider.list_records(zone, page, per_page)

    def create_record(self, zone: str, payload: Dict) -> Dict:
        """Create a new DNS record."""
        return self.provider.create_record(zone, payload)

    def delete_record(self, zone: str, record_id: str) -> Dict:
        """Delete a DNS record."""
        return self.provider.delete_record(zone, record_id)
