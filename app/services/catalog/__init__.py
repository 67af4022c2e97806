"""Hash family catalog and structural match rules."""

from app.services.catalog.catalog import HashCatalog, HashFamily
from app.services.catalog.families import DEFAULT_CATALOG
from app.services.catalog.rules import (
    FixedHex,
    FixedLength,
    MatchRule,
    SegmentedFormat,
    rule_matches,
)

__all__ = [
    "DEFAULT_CATALOG",
    "FixedHex",
    "FixedLength",
    "HashCatalog",
    "HashFamily",
    "MatchRule",
    "SegmentedFormat",
    "rule_matches",
]
