"""Prometheus metrics for the Redis record tables."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all record table metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Operation metrics
        self.operations_total = Counter(
            "redis_crud_operations_total",
            "Total number of record table operations",
            ["table", "operation", "status"],  # status: success, error
            registry=self._registry,
        )

        self.operation_latency_seconds = Histogram(
            "redis_crud_operation_latency_seconds",
            "Record table operation latency in seconds",
            ["operation"],
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 5.0),
            registry=self._registry,
        )

        # Scan metrics
        self.scan_batches_total = Counter(
            "redis_crud_scan_batches_total",
            "Total primary key batches read from the index",
            ["table"],
            registry=self._registry,
        )

        self.records_scanned_total = Counter(
            "redis_crud_records_scanned_total",
            "Total record bodies fetched during full scans",
            ["table"],
            registry=self._registry,
        )

        # Sequence metrics
        self.sequence_ids_issued_total = Counter(
            "redis_crud_sequence_ids_issued_total",
            "Total primary keys issued by table sequences",
            ["table"],
            registry=self._registry,
        )

        self.info = Info(
            "redis_crud",
            "Redis record table information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from redis_crud import __version__
    _metrics.info.info({
        "version": __version__,
    })

    start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
