"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API over a shared requests session
authenticated with an API token.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .base_provider import DNSProvider
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider using the v4 REST API."""

    def __init__(self, config: Dict, session: Optional[requests.Session] = None):
        """Initialize Cloudflare provider."""
        self.config = config
        self.api_token = config.get("api_token", "")
        self.base_url = config.get("base_url", DEFAULT_BASE_URL).rstrip("/")
        self.timeout = config.get("timeout", 30)

        if not self.api_token:
            logger.warning("No Cloudflare API token configured, requests will be rejected")

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.api_token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )

        logger.info(f"Cloudflare provider initialized for {self.base_url}")

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        json: Any = None,
    ) -> Dict:
        """Send a request and return the decoded response envelope."""
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params} body={json}")

        try:
            response = self.session.request(
                method, url, params=params, json=json, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"{method} {path} failed: {e}") from e

        # Error responses still carry the JSON envelope with the reason
        try:
            envelope = response.json()
        except ValueError as e:
            raise ProviderError(
                f"{method} {path} returned non-JSON response "
                f"(HTTP {response.status_code}): {response.text[:200]}",
                status_code=response.status_code,
            ) from e

        if not isinstance(envelope, dict):
            raise ProviderError(
                f"{method} {path} returned unexpected response: {envelope!r}",
                status_code=response.status_code,
            )

        logger.debug(f"HTTP {response.status_code}: {envelope}")
        return envelope

    def list_records(self, zone: str, page: int = 1, per_page: int = 1000) -> Dict:
        """Get one page of DNS records for a zone."""
        return self._request(
            "GET",
            f"/zones/{zone}/dns_records",
            params={"per_page": per_page, "page": page},
        )

    def create_record(self, zone: str, payload: Dict) -> Dict:
        """Create a new DNS record."""
        return self._request("POST", f"/zones/{zone}/dns_records", json=payload)

    def delete_record(self, zone: str, record_id: str) -> Dict:
        """Delete a DNS record by its provider-assigned ID."""
        return self._request("DELETE", f"/zones/{zone}/dns_records/{record_id}")
