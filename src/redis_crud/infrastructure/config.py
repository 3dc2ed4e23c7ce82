"""Configuration management for the Redis record tables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisConfig(BaseModel):
    """Redis connection configuration."""

    url: str | None = Field(
        default=None,
        description="Redis connection URL (falls back to REDIS_URL when unset)",
    )
    socket_timeout_seconds: float | None = Field(
        default=None, gt=0, description="Per-command socket timeout in seconds"
    )


class TableConfig(BaseModel):
    """Record table configuration."""

    key_prefix: list[str] = Field(
        default_factory=list, description="Key segments placed before every table name"
    )
    scan_batch_size: int = Field(
        default=50, ge=1, le=10000, description="Primary keys fetched per scan round trip"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_port: int | None = Field(
        default=None, ge=1, le=65535, description="Prometheus metrics port (disabled if unset)"
    )
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="redis_crud", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the Redis record tables."""

    model_config = SettingsConfigDict(
        env_prefix="REDIS_CRUD_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    redis: RedisConfig = Field(default_factory=RedisConfig)
    tables: TableConfig = Field(default_factory=TableConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
