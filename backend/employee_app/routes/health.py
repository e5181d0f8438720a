"""
Employee Service: Health Check Routes
======================================

What:  Liveness and readiness probes for container orchestration.
Who:   Called by Kubernetes probes and load balancers.

Probes:
    GET /health   liveness: the process is up. Never touches the database.
    GET /ready    readiness: one read through the DataAccessProvider.
                  Any failure at all, of any type, means "not ready".
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from employee_app.services.data_access_base import DataAccessProvider
from employee_app.services.data_access_provider import get_data_access_provider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_class=PlainTextResponse,
    summary="Liveness probe",
)
async def health() -> PlainTextResponse:
    return PlainTextResponse("Healthy")


@router.get(
    "/ready",
    response_class=PlainTextResponse,
    responses={503: {"description": "Database Not Ready"}},
    summary="Readiness probe",
    description="Lists employees as a connectivity check; the result is discarded.",
)
async def ready(
    provider: DataAccessProvider = Depends(get_data_access_provider),
) -> PlainTextResponse:
    try:
        await provider.list_employees()
    except Exception as e:
        logger.warning("Readiness check: database unreachable: %s", str(e))
        return PlainTextResponse("Database Not Ready", status_code=503)
    return PlainTextResponse("Ready")
