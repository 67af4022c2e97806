"""
MD5 reversal through a public precomputed lookup database.

The service answers ``GET {base_url}/{digest}`` with the plaintext as the
raw response body, or an empty body when the digest is unknown.
"""
import logging

import httpx

from app.core.config import get_settings
from app.core.exceptions import ReversalServiceError
from app.services.reversal.base import ReversalOutcome, ReversalProvider

logger = logging.getLogger(__name__)


class Md5LookupProvider(ReversalProvider):
    """Reverses MD5 digests with a single remote lookup."""

    family = "MD5"

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the lookup provider.

        Args:
            base_url: Lookup endpoint. Falls back to settings if not provided.
            client: HTTP client to use. A private client is created otherwise.
        """
        settings = get_settings()
        self.base_url = (base_url or settings.reversal_base_url).rstrip("/")
        self._owns_client = client is None
        # No transport timeout: the registry bounds the whole lookup
        self._client = client or httpx.AsyncClient(timeout=None)

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    async def reverse(self, digest: str) -> ReversalOutcome:
        url = f"{self.base_url}/{digest}"
        logger.debug("Looking up %s digest at %s", self.family, url)

        response = await self._client.get(url)
        response.raise_for_status()

        try:
            body = response.content.decode(response.charset_encoding or "utf-8")
        except (LookupError, UnicodeDecodeError) as e:
            raise ReversalServiceError(
                "Lookup service returned an undecodable body",
                {"url": url},
            ) from e

        plaintext = body.strip()
        if plaintext:
            return ReversalOutcome.found(plaintext)
        return ReversalOutcome.not_found()
