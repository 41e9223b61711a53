"""Pydantic configuration models for citecheck."""

from typing import Literal

from pydantic import BaseModel, Field

from citecheck.credentials import DEFAULT_API_KEY_ENV
from citecheck.data import DEFAULT_KEYWORDS, DEFAULT_LOOKBACK_DAYS


class GatewayConfig(BaseModel):
    """Configuration for ClaudeGateway.

    Models are fixed per operation and deliberately absent here.
    """

    api_key_env: str = DEFAULT_API_KEY_ENV
    max_tokens: int = Field(default=4096, gt=0)
    max_searches: int = Field(default=5, ge=1)

    model_config = {"frozen": True}


class SessionConfig(BaseModel):
    """Initial search form values."""

    default_keywords: str = DEFAULT_KEYWORDS
    lookback_days: int = Field(default=DEFAULT_LOOKBACK_DAYS, ge=0)

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Console logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = {"frozen": True}


class CiteCheckConfig(BaseModel):
    """Root configuration for citecheck."""

    gateway: GatewayConfig = Field(default_factory=GatewayConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
