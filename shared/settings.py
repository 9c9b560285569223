"""
Runtime settings for the storefront client.

Settings come from environment variables with sensible defaults for local
development against the stub backend (``python cli.py serve``).
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class StorefrontSettings(BaseModel):
    """
    Client configuration.

    Environment variables:
        STOREFRONT_API_URL: Base URL of the storefront backend
        STOREFRONT_TIMEOUT: Request timeout in seconds
        STOREFRONT_LOG_LEVEL: Logging level name (DEBUG, INFO, ...)
    """
    api_base_url: str = Field(default="http://127.0.0.1:8000")
    request_timeout: float = Field(default=10.0, gt=0)
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StorefrontSettings":
        """Build settings from the environment, ignoring unset variables."""
        env = os.environ if environ is None else environ
        values = {}
        if env.get("STOREFRONT_API_URL"):
            values["api_base_url"] = env["STOREFRONT_API_URL"]
        if env.get("STOREFRONT_TIMEOUT"):
            values["request_timeout"] = env["STOREFRONT_TIMEOUT"]
        if env.get("STOREFRONT_LOG_LEVEL"):
            values["log_level"] = env["STOREFRONT_LOG_LEVEL"].upper()
        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging the same way for every entry point."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
