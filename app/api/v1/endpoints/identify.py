from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import HashTooLongError
from app.dependencies import ClassifierDep, ReversalRegistryDep, SettingsDep
from app.models.schemas import ErrorResponse, HashFamilyInfo, IdentifyRequest, IdentifyResponse

router = APIRouter()


def check_hash_length(value: str, max_length: int) -> None:
    """
    Reject hashes longer than the configured maximum.

    Raises:
        HashTooLongError: If the value exceeds max_length
    """
    if len(value) > max_length:
        raise HashTooLongError(len(value), max_length)


@router.post(
    "",
    response_model=IdentifyResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Identify hash type",
    description=(
        "Match a hash against the catalog of known structural signatures "
        "and return every candidate family ranked by confidence."
    ),
)
async def identify_hash(
    request: IdentifyRequest,
    settings: SettingsDep,
    classifier: ClassifierDep,
    registry: ReversalRegistryDep,
) -> IdentifyResponse:
    """
    Identify the likely algorithm family of a hash.

    An empty candidate list means no family matched; more than one means
    the signature is shared and the ranking only reflects prevalence.
    """
    try:
        check_hash_length(request.hash, settings.max_hash_length)
    except HashTooLongError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    candidates = classifier.classify(request.hash)

    return IdentifyResponse(
        hash=classifier.normalize(request.hash),
        candidates=[
            HashFamilyInfo.from_family(family, registry.supports(family.name))
            for family in candidates
        ],
        ambiguous=len(candidates) > 1,
    )
