"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "BRIEFMAIL_"


class Settings(BaseModel):
    app_name:        str = "briefmail"
    newsletter_name: str = Field(default="DataCenterIQ", description="Masthead and subject name")
    audience:        str = Field(default="Hubbell Incorporated", description="Company the briefing is prepared for")

    model:         str   = Field(default="claude-sonnet-4-20250514", description="Anthropic model id")
    max_tokens:    int   = Field(default=6000, ge=1,   description="Response token cap")
    max_searches:  int   = Field(default=12,   ge=1,   description="Web search tool max_uses")
    lookback_days: int   = Field(default=2,    ge=0,   description="Citation cutoff window in days")
    api_timeout:   float = Field(default=300.0, gt=0,  description="Anthropic client timeout (seconds)")
    api_retries:   int   = Field(default=2,    ge=0,   description="Anthropic client max_retries")
    prompt_file:   Optional[str] = Field(default=None, description="Prompt template overriding the built-in one")

    smtp_host:     str           = ""
    smtp_port:     int           = Field(default=587, ge=1, le=65535, description="465 = implicit TLS, else STARTTLS")
    smtp_user:     Optional[str] = None
    smtp_password: Optional[str] = None
    smtp_timeout:  float         = Field(default=30.0, gt=0)
    from_email:    str           = ""
    from_name:     str           = "DataCenterIQ — Hubbell Intelligence"
    to_emails:     list[str]     = Field(default_factory=list, description="Recipients; comma-separated string accepted")

    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("to_emails", mode="before")
    @classmethod
    def _split_recipients(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            return [str(v).strip() for v in value if v and str(v).strip()]
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BRIEFMAIL_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
