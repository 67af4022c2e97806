from fastapi import APIRouter, HTTPException, status

from app.api.v1.endpoints.identify import check_hash_length
from app.core.exceptions import HashTooLongError
from app.dependencies import ClassifierDep, ReversalRegistryDep, SettingsDep
from app.models.schemas import ErrorResponse, ReverseRequest, ReverseResponse

router = APIRouter()


@router.post(
    "",
    response_model=ReverseResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Reverse hash",
    description=(
        "Identify a hash and, when a matched family has a lookup provider, "
        "try to recover its plaintext from a precomputed database."
    ),
)
async def reverse_hash(
    request: ReverseRequest,
    settings: SettingsDep,
    classifier: ClassifierDep,
    registry: ReversalRegistryDep,
) -> ReverseResponse:
    """
    Attempt plaintext recovery for a hash.

    The status is always one of found, not_found or unsupported. Lookup
    failures are reported as unsupported, never as server errors.
    """
    try:
        check_hash_length(request.hash, settings.max_hash_length)
    except HashTooLongError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

    digest = classifier.normalize(request.hash)
    if not digest:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Hash must not be empty",
        )

    candidates = classifier.classify(digest)
    outcome = await registry.attempt_reversal(digest, candidates, request.timeout)

    return ReverseResponse.from_outcome(digest, outcome, candidates)
