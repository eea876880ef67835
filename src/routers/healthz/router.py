import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from sqlalchemy import text

from src.config.database import STORAGE_ERRORS, async_session_manager

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    database: str
    version: str = "0.1.0"


async def ping_database() -> bool:
    try:
        async with async_session_manager() as session:
            await session.execute(text("SELECT 1"))
    except STORAGE_ERRORS:
        logger.exception("Database health check failed")
        return False
    return True


def get_database_ping() -> Callable[[], Awaitable[bool]]:
    """Dependency to get the database connectivity check."""
    return ping_database


@router.get("/", response_model=HealthCheckResponse)
async def health_check(
    response: Response,
    database_ping: Callable[[], Awaitable[bool]] = Depends(get_database_ping),
) -> HealthCheckResponse:
    """
    Health check endpoint to verify the API is running and can reach the database.
    """
    if await database_ping():
        return HealthCheckResponse(status="healthy", database="ok")

    response.status_code = 503
    return HealthCheckResponse(status="unhealthy", database="unavailable")
