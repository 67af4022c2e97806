from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ReversalStatus(str, Enum):
    """Possible outcomes of a reversal attempt."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNSUPPORTED = "unsupported"


NO_PROVIDER_REASON = "no reversal support for matched families"
ATTEMPT_FAILED_REASON = "reversal attempt failed"


@dataclass(frozen=True)
class ReversalOutcome:
    """Result of a reversal attempt."""

    status: ReversalStatus
    plaintext: str | None = None
    reason: str | None = None

    @classmethod
    def found(cls, plaintext: str) -> "ReversalOutcome":
        return cls(status=ReversalStatus.FOUND, plaintext=plaintext)

    @classmethod
    def not_found(cls) -> "ReversalOutcome":
        return cls(status=ReversalStatus.NOT_FOUND)

    @classmethod
    def unsupported(cls, reason: str) -> "ReversalOutcome":
        return cls(status=ReversalStatus.UNSUPPORTED, reason=reason)


class ReversalProvider(ABC):
    """
    Abstract base class for reversal providers.

    A provider recovers the plaintext of a digest belonging to one hash
    family, typically by querying a precomputed lookup database. It may
    raise on transport or protocol failures; the registry turns those
    into an unsupported outcome.
    """

    # Name of the hash family this provider handles
    family: str

    @abstractmethod
    async def reverse(self, digest: str) -> ReversalOutcome:
        """
        Look up the plaintext for a digest.

        Args:
            digest: Trimmed hash value

        Returns:
            ReversalOutcome.found() or ReversalOutcome.not_found()
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the provider."""
        return None
