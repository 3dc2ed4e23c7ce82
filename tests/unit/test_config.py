"""Unit tests for configuration module."""

from __future__ import annotations

import pytest

from redis_crud.infrastructure.config import (
    Config,
    ObservabilityConfig,
    RedisConfig,
    TableConfig,
    get_config,
)


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default configuration values."""
        for name in ("REDIS_CRUD_REDIS__URL", "REDIS_CRUD_TABLES__SCAN_BATCH_SIZE"):
            monkeypatch.delenv(name, raising=False)

        config = Config()

        assert config.redis.url is None
        assert config.redis.socket_timeout_seconds is None
        assert config.tables.key_prefix == []
        assert config.tables.scan_batch_size == 50
        assert config.observability.log_level == "INFO"
        assert config.observability.log_format == "json"
        assert config.observability.metrics_port is None

    def test_custom_table_config(self) -> None:
        """Test custom table configuration."""
        tables = TableConfig(key_prefix=["prod", "tenant1"], scan_batch_size=200)

        assert tables.key_prefix == ["prod", "tenant1"]
        assert tables.scan_batch_size == 200

    def test_invalid_scan_batch_size(self) -> None:
        """Test that a zero batch size raises validation error."""
        with pytest.raises(ValueError):
            TableConfig(scan_batch_size=0)

    def test_invalid_socket_timeout(self) -> None:
        """Test that a non-positive socket timeout raises validation error."""
        with pytest.raises(ValueError):
            RedisConfig(socket_timeout_seconds=0)

    def test_log_formats(self) -> None:
        """Test valid log formats."""
        for log_format in ["json", "console"]:
            observability = ObservabilityConfig(log_format=log_format)  # type: ignore
            assert observability.log_format == log_format

    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that nested settings are read from prefixed env vars."""
        monkeypatch.setenv("REDIS_CRUD_REDIS__URL", "redis://cache:6380/2")
        monkeypatch.setenv("REDIS_CRUD_TABLES__SCAN_BATCH_SIZE", "25")

        config = Config()

        assert config.redis.url == "redis://cache:6380/2"
        assert config.tables.scan_batch_size == 25


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        """Test that get_config returns the same instance."""
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2
