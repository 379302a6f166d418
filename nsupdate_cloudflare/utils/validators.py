"""
Validators - Input validation for nsupdate records

This module provides validation and normalization helpers for record types,
domain names and zone identifiers, backed by dnspython where DNS rules apply.
"""

import logging
import re

import dns.exception
import dns.name
import dns.rdatatype

logger = logging.getLogger(__name__)

# Record types whose add syntax carries a priority before the content
PRIORITY_RECORD_TYPES = frozenset({"MX", "SRV", "URI"})

_ZONE_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def normalize_record_type(record_type: str) -> str:
    """
    Return the canonical mnemonic for a record type.

    Args:
        record_type: Record type as written in the input, e.g. ``"mx"``

    Returns:
        Upper-case mnemonic known to dnspython, e.g. ``"MX"``

    Raises:
        ValueError: If the type is unknown or is a query-only meta type
    """
    try:
        rdtype = dns.rdatatype.from_text(record_type)
    except (dns.exception.DNSException, ValueError):
        raise ValueError(f"Unknown record type '{record_type}'")

    if dns.rdatatype.is_metatype(rdtype):
        raise ValueError(f"Record type '{record_type}' cannot be stored in a zone")

    return dns.rdatatype.to_text(rdtype)


def uses_priority(record_type: str) -> bool:
    """Check whether a record type takes a priority field."""
    return record_type.upper() in PRIORITY_RECORD_TYPES


def is_absolute_name(domain: str) -> bool:
    """
    Check whether a domain name is fully qualified (dot-terminated).

    Args:
        domain: The domain name to check

    Returns:
        True if the name parses and is absolute, False otherwise
    """
    if not domain or not isinstance(domain, str):
        return False

    try:
        return dns.name.from_text(domain, origin=None).is_absolute()
    except dns.exception.DNSException as e:
        logger.debug(f"Invalid domain name {domain!r}: {e}")
        return False


def validate_zone_id(zone: str) -> bool:
    """Check that a zone identifier looks like a Cloudflare zone ID."""
    if not zone or not isinstance(zone, str):
        return False
    return bool(_ZONE_ID_PATTERN.match(zone.strip().lower()))


def sanitize_fqdn(fqdn: str) -> str:
    """
    Normalize a domain name the way the provider stores it.

    The provider keeps names lower-case and without the trailing dot.

    Args:
        fqdn: The FQDN to sanitize

    Returns:
        Sanitized FQDN
    """
    if not fqdn:
        return fqdn

    return fqdn.strip().rstrip(".").lower()
