from __future__ import annotations

from fastapi import APIRouter

from people_api.core.config import settings
from people_api.services.directory_service import directory_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    try:
        if directory_service.initialized:
            ok = await directory_service.check_connection()
            services["google_workspace"] = "ok" if ok else "error"
        else:
            services["google_workspace"] = "not_configured"
    except Exception:
        services["google_workspace"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
