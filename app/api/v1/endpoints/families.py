from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import FamilyNotFoundError
from app.dependencies import CatalogDep, ReversalRegistryDep
from app.models.schemas import ErrorResponse, FamiliesResponse, HashFamilyInfo

router = APIRouter()


@router.get(
    "",
    response_model=FamiliesResponse,
    summary="List hash families",
    description="List every hash family the identifier knows, in catalog order.",
)
async def list_families(
    catalog: CatalogDep,
    registry: ReversalRegistryDep,
) -> FamiliesResponse:
    """List the catalog."""
    families = [
        HashFamilyInfo.from_family(family, registry.supports(family.name))
        for family in catalog
    ]
    return FamiliesResponse(families=families, total=len(families))


@router.get(
    "/{name}",
    response_model=HashFamilyInfo,
    responses={
        404: {"model": ErrorResponse, "description": "Hash family not found"},
    },
    summary="Get hash family",
    description="Retrieve a single hash family by name.",
)
async def get_family(
    name: str,
    catalog: CatalogDep,
    registry: ReversalRegistryDep,
) -> HashFamilyInfo:
    try:
        family = catalog.require(name)
    except FamilyNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )

    return HashFamilyInfo.from_family(family, registry.supports(family.name))
