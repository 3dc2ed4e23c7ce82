"""Redis CRUD driver.

The driver is the entry point a unit-of-work layer holds on to. It owns one
Redis client, the key prefix shared by its tables, and a record table per
entity table.

Example:
    driver = RedisCrudDriver("redis://localhost:6379/0", prefix="staging")
    users = driver.table(
        TableSchema("users", {"id": AttributeKind.INTEGER, "name": AttributeKind.STRING})
    )
    alice = users.insert({"name": "alice"})
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Any

import redis

from redis_crud.adapters.outbound.primary_key_index import DEFAULT_SCAN_BATCH_SIZE
from redis_crud.adapters.outbound.redis_connection import REDIS_URL_ENV_VAR, open_connection
from redis_crud.adapters.outbound.redis_record_table import RedisRecordTable
from redis_crud.domain.value_objects import normalize_prefix
from redis_crud.infrastructure.config import Config
from redis_crud.infrastructure.logging import get_logger
from redis_crud.infrastructure.metrics import MetricsRegistry
from redis_crud.ports.inbound.crud_driver import NoopTransaction
from redis_crud.ports.outbound.attribute_classifier import AttributeClassifier


logger = get_logger(__name__)


class RedisCrudDriver:
    """Redis implementation of the CrudDriver protocol.

    Thread Safety:
        redis-py clients are thread-safe; the table cache is populated
        without locking, so build tables before sharing the driver across
        threads.
    """

    def __init__(
        self,
        connection_or_credentials: redis.Redis | str | Mapping[str, Any] | None = None,
        prefix: str | Iterable[str] | None = None,
        *,
        scan_batch_size: int = DEFAULT_SCAN_BATCH_SIZE,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the driver and open (or adopt) its connection.

        Args:
            connection_or_credentials: Redis client, URL, keyword mapping,
                or None for the default client from REDIS_URL.
            prefix: Key segment(s) placed before every table name.
            scan_batch_size: Primary keys per batch for full scans.
            metrics: Metrics registry passed to every table.

        Raises:
            MissingConnectionUrlError: If no credentials are given and
                REDIS_URL is unset.
        """
        self._connection = open_connection(connection_or_credentials)
        self._prefix = normalize_prefix(prefix)
        self._scan_batch_size = scan_batch_size
        self._metrics = metrics
        self._tables: dict[str, RedisRecordTable] = {}

    @classmethod
    def from_config(
        cls,
        config: Config,
        metrics: MetricsRegistry | None = None,
    ) -> RedisCrudDriver:
        """Build a driver from application configuration.

        The configured URL wins, then REDIS_URL. Both get the configured
        socket timeout. With neither a configured URL nor a timeout the
        shared default client is used, and it keeps its own timeout.
        """
        url = config.redis.url
        timeout = config.redis.socket_timeout_seconds
        if url is None and timeout is not None:
            url = os.environ.get(REDIS_URL_ENV_VAR)
            if url is None:
                logger.warning(
                    "socket_timeout_not_applied",
                    reason=f"{REDIS_URL_ENV_VAR} unset, using the default connection",
                    socket_timeout_seconds=timeout,
                )

        connection: redis.Redis | None = None
        if url:
            connection = redis.Redis.from_url(
                url,
                decode_responses=True,
                socket_timeout=timeout,
            )

        return cls(
            connection,
            prefix=config.tables.key_prefix,
            scan_batch_size=config.tables.scan_batch_size,
            metrics=metrics,
        )

    @property
    def raw_connection(self) -> redis.Redis:
        return self._connection

    @property
    def prefix(self) -> tuple[str, ...]:
        return self._prefix

    @property
    def tables(self) -> dict[str, RedisRecordTable]:
        """Tables created so far, by table name."""
        return dict(self._tables)

    def table(self, schema: AttributeClassifier) -> RedisRecordTable:
        """Return the record table for a schema, creating it on first use.

        Raises:
            UnsupportedPrimaryKeyError: If the primary key is not an integer.
        """
        table = self._tables.get(schema.table_name)
        if table is None:
            table = RedisRecordTable(
                self._connection,
                schema,
                prefix=self._prefix,
                scan_batch_size=self._scan_batch_size,
                metrics=self._metrics,
            )
            self._tables[schema.table_name] = table
            logger.debug("record_table_created", table=table.keys.entity_key_prefix)
        return table

    # Redis MULTI/EXEC queues commands but cannot roll them back, so it is
    # not used as a transaction. The hooks exist for the unit-of-work layer,
    # which keeps its own dirty state and decides what to flush.

    def open_transaction(self) -> NoopTransaction:
        return NoopTransaction()

    def close_transaction(self, transaction: NoopTransaction) -> None:
        pass

    def rollback_transaction(self, transaction: NoopTransaction) -> None:
        pass
