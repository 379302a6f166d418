"""
DNS provider implementations.

This package contains the Cloudflare REST provider and an in-memory mock
provider that answers with the same response envelopes.
"""

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = ["DNSClient", "DNSProvider", "CloudflareProvider", "MockDNSProvider"]
