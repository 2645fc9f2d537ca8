"""rtnutil exception hierarchy.

The checksum engine never raises on malformed input; these exceptions are
only raised when a caller asks a result to raise for its error.
"""

from __future__ import annotations

from rtnutil.core.types import ErrorKind


class RTNUtilError(Exception):
    """Base exception for all rtnutil errors."""


class RTNError(RTNUtilError):
    """An RTN candidate was rejected."""

    def __init__(self, kind: ErrorKind, rtn: str) -> None:
        self.kind = kind
        self.rtn = rtn
        super().__init__(f"RTN {rtn!r} rejected: {kind.value}")
