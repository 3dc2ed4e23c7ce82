"""Pytest configuration and fixtures for redis_crud tests."""

from __future__ import annotations

from typing import Callable, Generator

import fakeredis
import pytest
from prometheus_client import CollectorRegistry

from redis_crud.adapters.outbound import RedisCrudDriver, RedisRecordTable
from redis_crud.adapters.outbound.redis_connection import reset_default_connection
from redis_crud.domain.entities import AttributeKind, TableSchema
from redis_crud.infrastructure.container import Container
from redis_crud.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def redis_server() -> fakeredis.FakeServer:
    """Provide an isolated in-memory Redis server for each test."""
    return fakeredis.FakeServer()


@pytest.fixture
def redis_client(redis_server: fakeredis.FakeServer) -> fakeredis.FakeRedis:
    """Provide a client on the test server, decoding replies to str."""
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def entity_schema() -> TableSchema:
    """Schema mirroring a typical entity: scalars plus structured attributes."""
    return TableSchema(
        table_name="some_entity",
        attributes={
            "id": AttributeKind.INTEGER,
            "foo": AttributeKind.INTEGER,
            "bar": AttributeKind.SYMBOL,
            "created_at": AttributeKind.DATETIME,
            "tags": AttributeKind.ARRAY,
            "settings": AttributeKind.MAPPING,
        },
    )


@pytest.fixture
def driver(
    redis_client: fakeredis.FakeRedis, metrics_registry: MetricsRegistry
) -> RedisCrudDriver:
    """Provide a driver bound to the test server under a 'test' prefix."""
    return RedisCrudDriver(redis_client, prefix="test", metrics=metrics_registry)


@pytest.fixture
def table(driver: RedisCrudDriver, entity_schema: TableSchema) -> RedisRecordTable:
    """Provide the record table for the entity schema."""
    return driver.table(entity_schema)


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep REDIS_URL, the default connection and the container per-test."""
    monkeypatch.delenv("REDIS_URL", raising=False)
    reset_default_connection()
    Container.reset()
    yield
    reset_default_connection()
    Container.reset()


@pytest.fixture
def metric_value(metrics_registry: MetricsRegistry) -> Callable[[str, dict[str, str]], float]:
    """Read a sample from the test metrics registry (0.0 if absent)."""

    def read(name: str, labels: dict[str, str]) -> float:
        value = metrics_registry._registry.get_sample_value(name, labels)
        return value if value is not None else 0.0

    return read


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "slow: Slow tests")
