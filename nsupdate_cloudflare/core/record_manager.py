"""
Record Manager - Translation of parsed actions into provider requests

This module maps parsed add/delete actions onto the request shapes the
provider API expects, and collects a closed batch into an ordered queue.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from ..models import Action, AddAction, DeleteAction, UpdateCommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddRequest:
    """Body of a record creation request."""

    record_type: str
    name: str
    content: str
    ttl: int
    priority: Optional[int] = None
    proxied: bool = False

    def to_payload(self) -> Dict:
        """Return the JSON body sent to the provider."""
        payload = {
            "type": self.record_type,
            "name": self.name,
            "content": self.content,
            "ttl": self.ttl,
            "proxied": self.proxied,
        }
        if self.priority is not None:
            payload["priority"] = self.priority
        return payload


@dataclass(frozen=True)
class DeleteRequest:
    """Record deletion; the record ID is resolved against current records."""

    record_type: str
    name: str


Request = Union[AddRequest, DeleteRequest]


def translate_action(action: Action) -> Request:
    """Map a parsed action onto its provider request. Added records are never proxied."""
    if isinstance(action, AddAction):
        return AddRequest(
            record_type=action.record_type,
            name=action.domain,
            content=action.content,
            ttl=action.ttl,
            priority=action.priority,
            proxied=False,
        )
    if isinstance(action, DeleteAction):
        return DeleteRequest(record_type=action.record_type, name=action.domain)
    raise TypeError(f"Unsupported action: {action!r}")


def action_from_payload(payload: Dict) -> AddAction:
    """Decode a record creation body back into an add action."""
    return AddAction(
        domain=payload["name"],
        ttl=payload["ttl"],
        record_type=payload["type"],
        priority=payload.get("priority"),
        content=payload["content"],
    )


class RequestQueue:
    """Ordered provider requests derived from one closed batch."""

    def __init__(self, requests: List[Request] = None):
        self._requests: List[Request] = list(requests or [])

    @classmethod
    def from_batch(cls, batch) -> "RequestQueue":
        """
        Build a queue from a batch closed by ``send``.

        Args:
            batch: An NSUpdateQueue whose ``send`` flag is set

        Returns:
            RequestQueue with one request per update command, in order

        Raises:
            ValueError: If the batch was not closed by a send command
        """
        if not batch.has_send():
            raise ValueError("Only a batch closed by 'send' can be queued")

        requests = [
            translate_action(command.action)
            for command in batch
            if isinstance(command, UpdateCommand)
        ]
        logger.debug(f"Queued {len(requests)} requests from {len(batch)} commands")
        return cls(requests)

    def __len__(self) -> int:
        return len(self._requests)

    def __iter__(self) -> Iterator[Request]:
        return iter(self._requests)

    def take(self) -> List[Request]:
        """Hand over all queued requests, leaving the queue empty."""
        requests, self._requests = self._requests, []
        return requests
