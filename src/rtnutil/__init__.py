"""Validate and repair ABA routing transit numbers."""

from __future__ import annotations

from rtnutil.core.exceptions import RTNError, RTNUtilError
from rtnutil.core.types import ErrorKind
from rtnutil.engine.checksum import get_missing_digit, validate
from rtnutil.models.results import MissingDigitResult, ValidationResult

__all__ = [
    "ErrorKind",
    "MissingDigitResult",
    "RTNError",
    "RTNUtilError",
    "ValidationResult",
    "get_missing_digit",
    "validate",
]
