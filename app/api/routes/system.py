import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.db.session import async_session
from app.schemas.system import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthStatus)
async def health():
    return {"status": "ok"}


@router.api_route("/api/health", methods=["GET", "HEAD"])
async def readiness():
    """Liveness plus a round trip to the database."""
    status = {"api": "ok", "database": None}
    http_status = 200

    try:
        async with async_session() as db:
            await db.execute(text("SELECT 1"))
        status["database"] = "connected"
    except Exception as e:
        logger.warning(f"Database check failed: {e}")
        status["database"] = f"error: {e}"
        http_status = 503

    return JSONResponse(content=status, status_code=http_status)
