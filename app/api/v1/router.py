from fastapi import APIRouter

from app.api.v1.endpoints import families, identify, reverse

api_router = APIRouter()

api_router.include_router(
    identify.router,
    prefix="/identify",
    tags=["Identification"],
)

api_router.include_router(
    reverse.router,
    prefix="/reverse",
    tags=["Reversal"],
)

api_router.include_router(
    families.router,
    prefix="/families",
    tags=["Catalog"],
)
