"""
nsupdate-cloudflare - Replay nsupdate scripts against Cloudflare DNS

Reads files written in an nsupdate-like syntax and applies the described
record additions and deletions to a Cloudflare zone, batch by batch.
"""

__version__ = "1.0.0"
__author__ = "nsupdate-cloudflare Team"
__description__ = "Replay nsupdate-style DNS update scripts against Cloudflare"

from .core.dns_manager import DNSManager
from .exceptions import FetchError, NSUpdateError, ParseError, ProviderError
from .parsers.nsupdate import NSUpdateQueue, parse_text
from .providers.dns_client import DNSClient

__all__ = [
    "DNSManager",
    "DNSClient",
    "FetchError",
    "NSUpdateError",
    "NSUpdateQueue",
    "ParseError",
    "ProviderError",
    "parse_text",
]
