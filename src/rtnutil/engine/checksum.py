"""ABA routing transit number checksum engine.

An RTN is valid in MICR format when its nine digits, weighted 3-7-1 by
position, sum to a multiple of 10. Because every weight is coprime to 10,
one unknown digit (marked ``X``) is always uniquely recoverable.

Malformed input is an expected case: both operations return a result value
carrying an ErrorKind instead of raising.
"""

from __future__ import annotations

import logging
from typing import Optional

from rtnutil.core.types import PLACEHOLDER, RTN, RTN_LENGTH, Digit, ErrorKind, Weight
from rtnutil.models.results import MissingDigitResult, ValidationResult

logger = logging.getLogger(__name__)

CHECKSUM_WEIGHTS: tuple[Weight, ...] = (3, 7, 1)

# ASCII digits only; str.isdigit() would accept "٣" or fullwidth "３"
_DIGIT_VALUES: dict[str, Digit] = {str(d): d for d in range(10)}


def weight_for(position: int) -> Weight:
    """Checksum weight applied to the digit at ``position``."""
    return CHECKSUM_WEIGHTS[position % len(CHECKSUM_WEIGHTS)]


def digit_value(char: str) -> Optional[Digit]:
    """Map ``'0'``-``'9'`` to 0-9; anything else maps to None."""
    return _DIGIT_VALUES.get(char)


def validate(rtn: RTN) -> ValidationResult:
    """Check that ``rtn`` is a 9-digit MICR RTN with a correct check digit."""
    if len(rtn) != RTN_LENGTH:
        return _reject_validation(rtn, ErrorKind.INCORRECT_LENGTH)

    checksum = 0
    for position, char in enumerate(rtn):
        digit = digit_value(char)
        if digit is None:
            return _reject_validation(rtn, ErrorKind.INVALID_CHARACTER)
        checksum += digit * weight_for(position)

    if checksum % 10 != 0:
        return _reject_validation(rtn, ErrorKind.CHECKSUM_MISMATCH)

    return ValidationResult(rtn=rtn)


def get_missing_digit(rtn: RTN) -> MissingDigitResult:
    """Recover the single digit of ``rtn`` replaced by the ``X`` placeholder.

    The scan stops at the first problem it meets, so a bad character ahead
    of a second placeholder is reported as INVALID_CHARACTER.
    """
    if len(rtn) != RTN_LENGTH:
        return _reject_recovery(rtn, ErrorKind.INCORRECT_LENGTH)

    checksum = 0
    missing_weight: Optional[Weight] = None
    for position, char in enumerate(rtn):
        if char == PLACEHOLDER:
            if missing_weight is not None:
                return _reject_recovery(rtn, ErrorKind.TOO_MANY_MISSING_DIGITS)
            missing_weight = weight_for(position)
            continue

        digit = digit_value(char)
        if digit is None:
            return _reject_recovery(rtn, ErrorKind.INVALID_CHARACTER)
        checksum += digit * weight_for(position)

    if missing_weight is None:
        return _reject_recovery(rtn, ErrorKind.NO_MISSING_DIGITS)

    # exactly one candidate matches since every weight is coprime to 10
    recovered = next(d for d in range(10) if (checksum + missing_weight * d) % 10 == 0)
    return MissingDigitResult(rtn=rtn, digit=recovered)


def _reject_validation(rtn: RTN, kind: ErrorKind) -> ValidationResult:
    logger.debug("validate rejected %r: %s", rtn, kind.value)
    return ValidationResult(rtn=rtn, error=kind)


def _reject_recovery(rtn: RTN, kind: ErrorKind) -> MissingDigitResult:
    logger.debug("get_missing_digit rejected %r: %s", rtn, kind.value)
    return MissingDigitResult(rtn=rtn, error=kind)
