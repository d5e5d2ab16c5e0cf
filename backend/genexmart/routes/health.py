"""
GenexMart Backend: Root and Health Check Routes
==================================================

What:  GET / (plain-text liveness banner) and GET /health (store probe).
Who:   Called by load balancers, container health checks and humans with curl.

Status levels:
    - healthy:   store answered SELECT 1 (HTTP 200)
    - unhealthy: store unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import text

from genexmart import __version__
from genexmart.database import engine
from genexmart.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Liveness banner")
async def root() -> str:
    return "Backend API is running..."


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
)
async def health_check():
    """
    Check that the service can reach its store.

    How:     Executes SELECT 1 on a fresh connection checkout.
    Returns: HealthResponse; HTTP 503 when the store is down.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if overall == "unhealthy":
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
