"""Dependency injection container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import structlog
from opentelemetry import trace

from redis_crud.adapters.outbound.redis_crud_driver import RedisCrudDriver
from redis_crud.infrastructure.config import Config, get_config
from redis_crud.infrastructure.logging import setup_logging
from redis_crud.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from redis_crud.infrastructure.tracing import setup_tracing


@dataclass
class Container:
    """Wires configuration, observability and the CRUD driver together."""

    config: Config
    logger: structlog.BoundLogger
    tracer: trace.Tracer
    metrics: MetricsRegistry
    driver: RedisCrudDriver

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> Container:
        """Create and initialize the container with all dependencies.

        Args:
            config: Configuration (defaults to the environment-derived one).
            metrics: Metrics registry; when omitted the global registry is
                used, and served over HTTP if a metrics port is configured.
        """
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        observability = config.observability

        logger = setup_logging(observability.log_level, observability.log_format)
        tracer = setup_tracing(
            service_name=observability.otel_service_name,
            otlp_endpoint=observability.otel_endpoint,
        )

        if metrics is None:
            if observability.metrics_port is not None:
                metrics = setup_metrics(observability.metrics_port)
            else:
                metrics = get_metrics()

        driver = RedisCrudDriver.from_config(config, metrics=metrics)

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            driver=driver,
        )

        logger.info(
            "redis_crud_container_initialized",
            key_prefix=list(driver.prefix),
            scan_batch_size=config.tables.scan_batch_size,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
