from pydantic import BaseModel, ConfigDict, Field

from app.services.catalog import HashFamily
from app.services.reversal import ReversalOutcome, ReversalStatus


# ============================================================================
# Catalog Schemas
# ============================================================================


class HashFamilyInfo(BaseModel):
    """A hash family as presented to API clients."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str
    length: int | None = Field(
        default=None, description="Fixed length, or null for variable-length formats"
    )
    variable_length: bool
    signature: str = Field(description="Structural signature the family is matched on")
    confidence: int = Field(ge=0, le=100)
    markers: list[str] = []
    reversible: bool = False

    @classmethod
    def from_family(cls, family: HashFamily, reversible: bool = False) -> "HashFamilyInfo":
        return cls(
            name=family.name,
            description=family.description,
            length=family.length,
            variable_length=family.is_variable_length,
            signature=family.rule.describe(),
            confidence=family.confidence,
            markers=list(family.markers),
            reversible=reversible,
        )


# ============================================================================
# Request Schemas
# ============================================================================


class IdentifyRequest(BaseModel):
    """Request schema for /identify endpoint."""

    hash: str


class ReverseRequest(BaseModel):
    """Request schema for /reverse endpoint."""

    hash: str
    timeout: float | None = Field(default=None, gt=0, le=60)


# ============================================================================
# Response Schemas
# ============================================================================


class IdentifyResponse(BaseModel):
    """Response schema for /identify endpoint."""

    hash: str
    candidates: list[HashFamilyInfo]
    ambiguous: bool


class ReverseResponse(BaseModel):
    """Response schema for /reverse endpoint."""

    hash: str
    status: ReversalStatus
    plaintext: str | None = None
    reason: str | None = None
    candidates: list[str]

    @classmethod
    def from_outcome(
        cls, digest: str, outcome: ReversalOutcome, candidates: list[HashFamily]
    ) -> "ReverseResponse":
        return cls(
            hash=digest,
            status=outcome.status,
            plaintext=outcome.plaintext,
            reason=outcome.reason,
            candidates=[family.name for family in candidates],
        )


class FamiliesResponse(BaseModel):
    """Response schema for /families endpoint."""

    families: list[HashFamilyInfo]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict = Field(default_factory=dict)
