"""Plaintext recovery for hash families with a known lookup service."""

from app.services.reversal.base import ReversalOutcome, ReversalProvider, ReversalStatus
from app.services.reversal.md5_lookup import Md5LookupProvider
from app.services.reversal.registry import ReversalRegistry, build_default_registry
from app.services.reversal.session import ReversalSession

__all__ = [
    "Md5LookupProvider",
    "ReversalOutcome",
    "ReversalProvider",
    "ReversalRegistry",
    "ReversalSession",
    "ReversalStatus",
    "build_default_registry",
]
