# clean_api/adapters/inbound/api/v1/endpoints/health_endpoint.py

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from clean_api.adapters.configuration.config import settings
from clean_api.adapters.inbound.api.deps import get_session
from clean_api.adapters.outbound.persistence.database import check_db_connection

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get("", summary="Liveness check")
async def liveness():
    return {"status": "ok", "version": settings.VERSION}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Checks that the database answers a trivial query.",
    responses={503: {"description": "Database unreachable"}},
)
async def readiness(db: AsyncSession = Depends(get_session)):
    if await check_db_connection(db):
        return {"status": "ok", "database": "ok"}

    logger.error("Readiness check failed: database unreachable")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "database": "unreachable"},
    )
