"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    """HTTP service configuration."""

    model_config = {"env_prefix": "RTNUTIL_API_"}

    title: str = "RTN Utility Service"
    root_path: str = ""  # set when mounted behind a path-rewriting proxy


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "RTNUTIL_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    api: APIConfig = Field(default_factory=APIConfig)
