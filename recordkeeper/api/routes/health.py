"""
Health Check Routes - System health and monitoring endpoints.

- /health       : liveness, always 200, reports database connectivity
- /health/ready : readiness, 503 while the database is unreachable
"""
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from recordkeeper import __version__
from recordkeeper.core.logging_config import get_logger
from recordkeeper.database.connection import get_database
from recordkeeper.models.chat import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


def _database_status() -> str:
    return "connected" if get_database().check_connection() else "disconnected"


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
def health_check() -> HealthResponse:
    """
    Report process liveness.

    The database flag is informational; the status stays 'healthy' as
    long as the process answers.
    """
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        database=_database_status(),
        timestamp=datetime.utcnow(),
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
    responses={503: {"model": HealthResponse, "description": "Database unreachable"}},
)
def readiness_check():
    """Ready only while the database answers."""
    logger.debug("Readiness check requested")

    database = _database_status()
    body = HealthResponse(
        status="ready" if database == "connected" else "not_ready",
        version=__version__,
        database=database,
        timestamp=datetime.utcnow(),
    )
    if database != "connected":
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))
    return body
