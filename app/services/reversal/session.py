import asyncio
from collections.abc import Sequence

from app.services.catalog import HashFamily
from app.services.reversal.base import ReversalOutcome
from app.services.reversal.registry import ReversalRegistry


class ReversalSession:
    """
    Keeps at most one reversal attempt in flight for a single input box.

    Submitting a new attempt cancels the pending one; whoever was awaiting
    the cancelled attempt gets ``asyncio.CancelledError`` and its result is
    discarded. Separate sessions are independent.
    """

    def __init__(self, registry: ReversalRegistry):
        self.registry = registry
        self._pending: asyncio.Task[ReversalOutcome] | None = None

    @property
    def in_flight(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def submit(
        self,
        original_input: str,
        candidates: Sequence[HashFamily],
        timeout: float | None = None,
    ) -> asyncio.Task[ReversalOutcome]:
        """Start a reversal attempt, cancelling any attempt still pending."""
        self.cancel()
        self._pending = asyncio.create_task(
            self.registry.attempt_reversal(original_input, candidates, timeout)
        )
        return self._pending

    def cancel(self) -> bool:
        """Cancel the pending attempt. Returns True if one was cancelled."""
        if self.in_flight:
            self._pending.cancel()
            return True
        return False
