"""Result values returned by the checksum engine."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from rtnutil.core.exceptions import RTNError
from rtnutil.core.types import PLACEHOLDER, ErrorKind


class ValidationResult(BaseModel):
    """Outcome of validating a complete 9-digit RTN."""

    rtn: str
    error: Optional[ErrorKind] = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise RTNError if the RTN was rejected."""
        if self.error is not None:
            raise RTNError(self.error, self.rtn)


class MissingDigitResult(BaseModel):
    """Outcome of recovering the single placeholder digit of an RTN."""

    rtn: str
    digit: Optional[int] = Field(default=None, ge=0, le=9)
    error: Optional[ErrorKind] = None

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def repaired(self) -> Optional[str]:
        """The candidate with its placeholder replaced by the recovered digit."""
        if self.digit is None:
            return None
        return self.rtn.replace(PLACEHOLDER, str(self.digit), 1)

    def unwrap(self) -> int:
        """Return the recovered digit, raising RTNError on failure."""
        if self.error is not None:
            raise RTNError(self.error, self.rtn)
        if self.digit is None:
            raise RTNError(ErrorKind.NO_MISSING_DIGITS, self.rtn)
        return self.digit
