"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from forecaster.config.defaults import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS


class ForecasterConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
