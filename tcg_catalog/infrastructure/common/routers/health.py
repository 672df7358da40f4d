from fastapi import APIRouter

from tcg_catalog.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Report that the service is up.

    This is a public endpoint that doesn't require authentication.
    """
    settings = get_settings()
    return {"status": "ok", "service": settings.PROJECT_NAME, "version": settings.VERSION}
