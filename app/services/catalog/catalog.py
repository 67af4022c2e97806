from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from app.core.exceptions import CatalogError, FamilyNotFoundError
from app.services.catalog.rules import MatchRule


@dataclass(frozen=True)
class HashFamily:
    """Descriptor of a hash algorithm family."""

    name: str
    rule: MatchRule
    length: int | None
    description: str
    confidence: int
    markers: tuple[str, ...] = ()

    @property
    def is_variable_length(self) -> bool:
        return self.length is None


class HashCatalog:
    """
    Immutable, ordered collection of hash family descriptors.

    Declaration order is significant: the classifier uses it to break
    ties between families with equal confidence.
    """

    def __init__(self, families: Iterable[HashFamily]):
        self._families: tuple[HashFamily, ...] = tuple(families)
        self._by_name: dict[str, HashFamily] = {}

        for family in self._families:
            if family.name in self._by_name:
                raise CatalogError(
                    f"Duplicate hash family '{family.name}'",
                    {"family_name": family.name},
                )
            if not 0 <= family.confidence <= 100:
                raise CatalogError(
                    f"Confidence for '{family.name}' must be within [0, 100]",
                    {"family_name": family.name, "confidence": family.confidence},
                )
            self._by_name[family.name] = family

    def __iter__(self) -> Iterator[HashFamily]:
        return iter(self._families)

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def names(self) -> list[str]:
        return [family.name for family in self._families]

    def get(self, name: str) -> HashFamily | None:
        return self._by_name.get(name)

    def require(self, name: str) -> HashFamily:
        """
        Look up a family by name.

        Raises:
            FamilyNotFoundError: If no family with that name exists
        """
        family = self._by_name.get(name)
        if family is None:
            raise FamilyNotFoundError(name)
        return family
