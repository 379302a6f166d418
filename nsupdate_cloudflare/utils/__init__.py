"""
Utility functions and helpers.

This package contains validation and normalization helpers shared by the
parser and the providers.
"""

from .validators import (
    is_absolute_name,
    normalize_record_type,
    sanitize_fqdn,
    uses_priority,
    validate_zone_id,
)

__all__ = [
    "is_absolute_name",
    "normalize_record_type",
    "sanitize_fqdn",
    "uses_priority",
    "validate_zone_id",
]
