"""Health & Readiness Probes — root banner, liveness and readiness endpoints.

Invariants:
    - GET / always answers the plain-text banner if the process is up
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database does not answer ping (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from car_doctor.infrastructure.database import MongoManager, get_db

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

BANNER = "Car Doctor Server is Running!"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return BANNER


@router.get("/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "car-doctor-api"}


@router.get("/health/ready")
async def readiness_check(db: MongoManager = Depends(get_db)):
    """Readiness probe — includes database connectivity."""
    if not await db.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
