from app.services.catalog import DEFAULT_CATALOG, HashCatalog, HashFamily, rule_matches


class HashClassifier:
    """
    Structural hash classifier.

    Evaluates a hash string against every family in a catalog and ranks
    the families whose rule accepts it. Families that share a signature
    are all reported; the ranking only reflects their static priors.
    This is pure and holds no state beyond the read-only catalog, so a
    single instance can be shared freely.
    """

    def __init__(self, catalog: HashCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    @staticmethod
    def normalize(text: str) -> str:
        """Strip surrounding whitespace from a raw hash string."""
        return text.strip()

    def classify(self, text: str) -> list[HashFamily]:
        """
        Identify candidate hash families for a string.

        Args:
            text: Raw hash string as entered by the user

        Returns:
            Matching families sorted by confidence (highest first), ties
            kept in catalog order. Empty when nothing matches or the
            input is blank.
        """
        candidate = self.normalize(text)
        if not candidate:
            return []

        matches = [
            family for family in self.catalog
            if rule_matches(family.rule, candidate)
        ]

        # sorted() is stable, so equal confidences keep catalog order
        return sorted(matches, key=lambda family: family.confidence, reverse=True)


_default_classifier = HashClassifier()


def classify(text: str) -> list[HashFamily]:
    """Classify ``text`` against the built-in catalog."""
    return _default_classifier.classify(text)
