import asyncio
import logging
from collections.abc import Iterable, Sequence

import httpx

from app.core.config import Settings, get_settings
from app.core.exceptions import ProviderNotFoundError, ReversalError, ReversalTimeoutError
from app.services.catalog import HashFamily
from app.services.reversal.base import (
    ATTEMPT_FAILED_REASON,
    NO_PROVIDER_REASON,
    ReversalOutcome,
    ReversalProvider,
)
from app.services.reversal.md5_lookup import Md5LookupProvider

logger = logging.getLogger(__name__)


class ReversalRegistry:
    """
    Registry of reversal providers keyed by hash family name.

    Adding reversal support for another family only means registering a
    provider; the catalog and classifier are untouched. The registry keeps
    no per-call state: no cache, no retry counters, no sessions.
    """

    def __init__(
        self,
        providers: Iterable[ReversalProvider] = (),
        default_timeout: float | None = None,
    ):
        self._providers: dict[str, ReversalProvider] = {}
        if default_timeout is None:
            default_timeout = get_settings().reversal_timeout_seconds
        self.default_timeout: float = default_timeout
        for provider in providers:
            self.register(provider)

    def register(self, provider: ReversalProvider) -> ReversalProvider:
        """
        Register a provider for its family, replacing any existing one.

        Returns:
            The provider (so this can be chained)
        """
        self._providers[provider.family] = provider
        return provider

    def unregister(self, family_name: str) -> ReversalProvider:
        """
        Remove and return the provider for a family.

        Raises:
            ProviderNotFoundError: If the family has no provider
        """
        if family_name not in self._providers:
            raise ProviderNotFoundError(family_name)
        return self._providers.pop(family_name)

    def get(self, family_name: str) -> ReversalProvider | None:
        return self._providers.get(family_name)

    def supports(self, family_name: str) -> bool:
        return family_name in self._providers

    def supported_families(self) -> list[str]:
        return list(self._providers)

    def select_provider(
        self, candidates: Sequence[HashFamily]
    ) -> ReversalProvider | None:
        """Pick the provider of the highest ranked candidate that has one."""
        for family in candidates:
            provider = self._providers.get(family.name)
            if provider is not None:
                return provider
        return None

    async def attempt_reversal(
        self,
        original_input: str,
        candidates: Sequence[HashFamily],
        timeout: float | None = None,
    ) -> ReversalOutcome:
        """
        Try to recover the plaintext behind a hash.

        Makes at most one outbound lookup and never retries. Every failure
        (transport errors, non-2xx responses, malformed bodies, timeouts)
        is reported as an unsupported outcome rather than raised.
        Cancellation by the caller propagates.

        Args:
            original_input: The hash as submitted (trimmed before lookup)
            candidates: Ranked classification result for the same input
            timeout: Seconds to wait for the lookup; defaults to the
                registry's default timeout, itself falling back to
                settings, so a lookup is always bounded

        Returns:
            ReversalOutcome
        """
        provider = self.select_provider(candidates)
        if provider is None:
            return ReversalOutcome.unsupported(NO_PROVIDER_REASON)

        digest = original_input.strip()
        if timeout is None:
            timeout = self.default_timeout

        try:
            return await self._run_provider(provider, digest, timeout)
        except (ReversalError, httpx.HTTPError) as e:
            logger.warning("Reversal via %s provider failed: %s", provider.family, e)
        except Exception:
            logger.exception("Unexpected error in %s reversal provider", provider.family)

        return ReversalOutcome.unsupported(ATTEMPT_FAILED_REASON)

    async def _run_provider(
        self,
        provider: ReversalProvider,
        digest: str,
        timeout: float,
    ) -> ReversalOutcome:
        try:
            return await asyncio.wait_for(provider.reverse(digest), timeout)
        except asyncio.TimeoutError as e:
            raise ReversalTimeoutError(provider.family, timeout) from e

    async def close(self) -> None:
        """Close every registered provider."""
        for provider in self._providers.values():
            await provider.close()


def build_default_registry(settings: Settings | None = None) -> ReversalRegistry:
    """Create a registry with the built-in providers wired in."""
    settings = settings or get_settings()
    return ReversalRegistry(
        providers=[Md5LookupProvider(base_url=settings.reversal_base_url)],
        default_timeout=settings.reversal_timeout_seconds,
    )
