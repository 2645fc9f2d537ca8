"""Request bodies accepted by the HTTP service."""

from __future__ import annotations

from pydantic import BaseModel


class RTNRequest(BaseModel):
    """A single RTN candidate, passed through unmodified."""

    rtn: str

    model_config = {"str_strip_whitespace": False}
