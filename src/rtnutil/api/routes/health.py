"""Liveness and readiness endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from rtnutil.engine import checksum

router = APIRouter(tags=["health"])

# known-good checksum; a rejection means the engine is broken
READINESS_RTN = "021200025"


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(response: Response) -> dict[str, str]:
    """Report ready only if the checksum engine accepts a known-good RTN."""
    result = checksum.validate(READINESS_RTN)
    if not result.ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"status": "unavailable", "error": result.error.value}
    return {"status": "ready"}
