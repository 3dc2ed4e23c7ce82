"""Infrastructure layer - cross-cutting concerns.

The DI container lives in ``redis_crud.infrastructure.container`` and is not
re-exported here, since it imports the adapters that depend on this package.
"""

from redis_crud.infrastructure.config import Config, get_config
from redis_crud.infrastructure.logging import setup_logging, get_logger
from redis_crud.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from redis_crud.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
