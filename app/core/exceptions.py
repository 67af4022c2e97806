from typing import Any


class HashIdentificationError(Exception):
    """Base exception for all hash identification errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(HashIdentificationError):
    """Raised when input validation fails."""

    pass


class HashTooLongError(ValidationError):
    """Raised when a submitted hash exceeds the maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Hash length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class CatalogError(HashIdentificationError):
    """Raised when a hash family catalog is malformed."""

    pass


class FamilyNotFoundError(CatalogError):
    """Raised when a requested hash family is not in the catalog."""

    def __init__(self, family_name: str):
        super().__init__(
            f"Hash family '{family_name}' not found",
            {"family_name": family_name},
        )


class ReversalError(HashIdentificationError):
    """Base exception for reversal provider errors."""

    pass


class ReversalServiceError(ReversalError):
    """Raised when the remote lookup service answers with something unusable."""

    pass


class ProviderNotFoundError(ReversalError):
    """Raised when no reversal provider is registered for a family."""

    def __init__(self, family_name: str):
        super().__init__(
            f"No reversal provider registered for '{family_name}'",
            {"family_name": family_name},
        )


class ReversalTimeoutError(ReversalError):
    """Raised when a reversal lookup times out."""

    def __init__(self, family_name: str, timeout: float):
        super().__init__(
            f"Reversal for '{family_name}' timed out after {timeout}s",
            {"family_name": family_name, "timeout": timeout},
        )
