"""
Data model shared by the parser, the translator and the reconciliation engine.
"""

from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Union


@dataclass(frozen=True)
class AddAction:
    """Add a record: ``add <domain> <ttl> <type> [<priority>] <content>``."""

    domain: str
    ttl: int
    record_type: str
    priority: Optional[int]
    content: str


@dataclass(frozen=True)
class DeleteAction:
    """Delete the first record matching name and type: ``delete <domain> <type>``."""

    domain: str
    record_type: str


Action = Union[AddAction, DeleteAction]


@dataclass(frozen=True)
class UpdateCommand:
    action: Action


@dataclass(frozen=True)
class SendCommand:
    """Batch boundary marker."""


Command = Union[UpdateCommand, SendCommand]


@dataclass(frozen=True)
class ProviderRecord:
    """Snapshot of one DNS record as currently stored by the provider."""

    id: str
    record_type: str
    name: str
    content: str
    ttl: int
    proxied: bool = False
    locked: bool = False
    zone_id: str = ""
    zone_name: str = ""

    @classmethod
    def from_api(cls, data: Dict) -> "ProviderRecord":
        """Build a record from one entry of the provider's ``result`` list."""
        return cls(
            id=data["id"],
            record_type=data.get("type", ""),
            name=data.get("name", ""),
            content=data.get("content", ""),
            ttl=int(data.get("ttl") or 0),
            proxied=bool(data.get("proxied", False)),
            locked=bool(data.get("locked", False)),
            zone_id=data.get("zone_id", ""),
            zone_name=data.get("zone_name", ""),
        )


class Tally(NamedTuple):
    """Outcome of one batch: requests processed and requests failed."""

    processed: int = 0
    failed: int = 0

    def __add__(self, other: "Tally") -> "Tally":
        return Tally(self.processed + other.processed, self.failed + other.failed)
