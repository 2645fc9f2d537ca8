"""RTN validation and repair endpoints.

Rejected candidates are normal responses: the error kind is reported in the
body with a 200 status.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from rtnutil.engine.checksum import get_missing_digit, validate
from rtnutil.models.requests import RTNRequest

router = APIRouter(tags=["rtn"])


@router.post("/validate")
async def validate_rtn(request: RTNRequest) -> dict[str, Any]:
    """Check an RTN's length, characters and check digit."""
    result = validate(request.rtn)
    return {
        "rtn": result.rtn,
        "valid": result.ok,
        "error": result.error.value if result.error else None,
    }


@router.post("/missing-digit")
async def recover_missing_digit(request: RTNRequest) -> dict[str, Any]:
    """Recover the digit hidden behind a single ``X`` placeholder."""
    result = get_missing_digit(request.rtn)
    return {
        "rtn": result.rtn,
        "digit": result.digit,
        "repaired": result.repaired,
        "error": result.error.value if result.error else None,
    }
