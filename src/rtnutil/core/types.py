"""Type aliases, fixed RTN constants and the closed error-kind enum."""

from __future__ import annotations

from enum import Enum

RTN = str
Digit = int
Weight = int

RTN_LENGTH = 9
PLACEHOLDER = "X"  # uppercase only; "x" is an invalid character


class ErrorKind(str, Enum):
    """Every way an RTN candidate can be rejected."""

    INCORRECT_LENGTH = "incorrect length"
    INVALID_CHARACTER = "invalid character"
    CHECKSUM_MISMATCH = "checksum mismatch"
    TOO_MANY_MISSING_DIGITS = "too many missing digits"
    NO_MISSING_DIGITS = "no missing digits"
