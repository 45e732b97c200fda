"""The /api router: folders, cars and a liveness check."""

from datetime import datetime, timezone

from fastapi import APIRouter

from spiral_catalog.routers import cars, folders

router = APIRouter(prefix="/api")

router.include_router(folders.router)
router.include_router(cars.router)


@router.get("/health", tags=["health"])
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
