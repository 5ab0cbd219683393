"""
Project Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 against the entity store and reports uptime.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Store reachable (HTTP 200)
    - unhealthy: Store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app import __version__
from app.routes.paths import HEALTH
from app.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def build_health_router(engine: AsyncEngine) -> APIRouter:
    """Create the /health router probing the given engine."""
    router = APIRouter(tags=["Health"])
    start_time = time.time()

    @router.get(
        HEALTH,
        response_model=HealthResponse,
        summary="Service health check",
    )
    async def health_check(response: Response) -> HealthResponse:
        db_status = "connected"
        overall = "healthy"

        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            db_status = "disconnected"
            overall = "unhealthy"
            response.status_code = 503
            logger.warning("Health check: database unreachable: %s", str(e))

        return HealthResponse(
            status=overall,
            version=__version__,
            database=db_status,
            uptime_seconds=round(time.time() - start_time, 2),
        )

    return router
