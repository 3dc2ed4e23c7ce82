"""Record table stored in Redis.

This adapter implements the RecordTable port on plain Redis primitives:

    - record bodies are hashes at ``<prefix>:<table>:<id>``
    - live primary keys are a sorted set at ``<prefix>:<table>$all``
    - new primary keys come from an INCR counter at ``<prefix>:<table>$sequence``

Write ordering:
    insert writes the body before adding the index entry, and hard_delete
    removes the body before the index entry. A crash between the two steps
    therefore leaves at most an orphaned body that no scan reports, never an
    index entry pointing at nothing.

Bulk operations walk the index in batches and pipeline the per-record
commands of a batch into one round trip. Pipelines are not MULTI blocks:
commands run in order but a failure can leave a batch partially applied.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generator

from redis_crud.adapters.outbound.primary_key_index import (
    DEFAULT_SCAN_BATCH_SIZE,
    RedisPrimaryKeyIndex,
)
from redis_crud.adapters.outbound.sequence_allocator import RedisSequenceAllocator
from redis_crud.domain.entities import AttributeKind
from redis_crud.domain.services import AttributeCodec
from redis_crud.domain.value_objects import RecordId, TableKeys, validate_record_id
from redis_crud.infrastructure.logging import get_logger
from redis_crud.infrastructure.metrics import MetricsRegistry, get_metrics
from redis_crud.infrastructure.tracing import trace_span
from redis_crud.ports.inbound.crud_driver import UnsupportedPrimaryKeyError
from redis_crud.ports.inbound.record_table import (
    Attributes,
    RecordAlreadyExistsError,
    RecordCorruptionError,
    RecordNotFoundError,
)
from redis_crud.ports.outbound.attribute_classifier import AttributeClassifier
from redis_crud.ports.outbound.key_value_store import KeyValueStore


logger = get_logger(__name__)


class RedisRecordTable:
    """Redis implementation of the RecordTable protocol.

    Attributes:
        table_name: Logical table name from the schema.
        keys: Key namer for this table.
        scan_batch_size: Primary keys fetched per scan round trip.
    """

    def __init__(
        self,
        store: KeyValueStore,
        schema: AttributeClassifier,
        prefix: tuple[str, ...] = (),
        scan_batch_size: int = DEFAULT_SCAN_BATCH_SIZE,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            store: Redis client (shared with other tables).
            schema: Classifier for this table's attributes.
            prefix: Key segments placed before the table name.
            scan_batch_size: Primary keys per batch in all/hard_delete_all.
            metrics: Metrics registry (defaults to the global one).

        Raises:
            UnsupportedPrimaryKeyError: If the primary key is not an integer.
            ValueError: If scan_batch_size < 1.
        """
        if schema.primary_key_type != AttributeKind.INTEGER:
            raise UnsupportedPrimaryKeyError(schema.table_name, schema.primary_key_type)

        if scan_batch_size < 1:
            raise ValueError(f"scan_batch_size must be >= 1, got {scan_batch_size}")

        self._store = store
        self._table_name = schema.table_name
        self._primary_key_attribute = schema.primary_key_attribute
        self._keys = TableKeys(schema.table_name, prefix)
        self._scan_batch_size = scan_batch_size
        self._metrics = metrics or get_metrics()

        self._codec = AttributeCodec(schema)
        self._sequence = RedisSequenceAllocator(store, self._keys)
        self._index = RedisPrimaryKeyIndex(store, self._keys)

        self._log = logger.bind(table=self._keys.entity_key_prefix)

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def keys(self) -> TableKeys:
        return self._keys

    @property
    def primary_key_attribute(self) -> str:
        return self._primary_key_attribute

    @property
    def scan_batch_size(self) -> int:
        return self._scan_batch_size

    @property
    def sequence(self) -> RedisSequenceAllocator:
        return self._sequence

    @property
    def index(self) -> RedisPrimaryKeyIndex:
        return self._index

    @property
    def codec(self) -> AttributeCodec:
        return self._codec

    # =========================================================================
    # Writes
    # =========================================================================

    def insert(self, attributes: Mapping[str, Any]) -> Attributes:
        """Store a new record, allocating a primary key if none is given.

        Raises:
            RecordAlreadyExistsError: If the supplied primary key is indexed.
            TypeError: If the supplied primary key is not an int.
            ValueError: If the supplied primary key is negative.
        """
        with self._observe("insert"):
            attributes = dict(attributes)
            record_id = attributes.get(self._primary_key_attribute)

            if record_id is not None:
                record_id = validate_record_id(record_id)
                if self._index.contains(record_id):
                    raise RecordAlreadyExistsError(self._table_name, record_id)
            else:
                record_id = self._sequence.next_id()
                self._metrics.sequence_ids_issued_total.labels(table=self._table_name).inc()
                attributes[self._primary_key_attribute] = record_id

            fields = {
                name: value
                for name, value in self._codec.encode(attributes).items()
                if value is not None
            }

            self._store.hset(self._keys.record_key(record_id), mapping=fields)
            self._index.add(record_id)

            self._log.debug("record_inserted", record_id=record_id)
            return self._reload(record_id)

    def update(self, attributes: Mapping[str, Any]) -> Attributes:
        """Merge attributes into a stored record.

        Attributes set to None are removed from the stored record.

        Raises:
            RecordNotFoundError: If the primary key is missing or not indexed.
        """
        with self._observe("update"):
            record_id = attributes.get(self._primary_key_attribute)

            if record_id is None or not self._index.contains(record_id):
                raise RecordNotFoundError(self._table_name, record_id)

            encoded = self._codec.encode(attributes)
            fields = {name: value for name, value in encoded.items() if value is not None}
            cleared = [name for name, value in encoded.items() if value is None]

            key = self._keys.record_key(record_id)
            self._store.hset(key, mapping=fields)
            if cleared:
                self._store.hdel(key, *cleared)

            self._log.debug("record_updated", record_id=record_id, fields=sorted(encoded))
            return self._reload(record_id)

    def hard_delete(self, record_id: int) -> None:
        """Remove a record body, then its index entry.

        Raises:
            RecordCorruptionError: If the body or the index entry was
                already missing.
        """
        with self._observe("hard_delete"):
            key = self._keys.record_key(record_id)

            if self._store.delete(key) != 1:
                self._log.error("record_body_missing", record_id=record_id, key=key)
                raise RecordCorruptionError(
                    self._table_name, record_id, f"{key} does not exist"
                )

            if not self._index.remove(record_id):
                self._log.error(
                    "index_entry_missing", record_id=record_id, index_key=self._index.key
                )
                raise RecordCorruptionError(
                    self._table_name,
                    record_id,
                    f"was not present in the primary key index {self._index.key}",
                )

            self._log.debug("record_deleted", record_id=record_id)

    def hard_delete_all(self) -> int:
        """Remove every record, one pipelined batch at a time.

        Returns:
            Number of primary keys removed from the index.
        """
        with self._observe("hard_delete_all"):
            removed = 0
            for batch in self._index_batches():
                with trace_span(
                    "redis_crud.hard_delete_batch",
                    {"table": self._table_name, "batch_size": len(batch)},
                ):
                    pipe = self._store.pipeline(transaction=False)
                    for record_id in batch:
                        pipe.delete(self._keys.record_key(record_id))
                        pipe.zrem(self._index.key, record_id)
                    replies = pipe.execute()
                # Replies alternate DEL, ZREM per id.
                removed += sum(1 for reply in replies[1::2] if reply)

            self._log.info("all_records_deleted", removed=removed)
            return removed

    # =========================================================================
    # Reads
    # =========================================================================

    def find(self, record_id: int) -> Attributes | None:
        """Return the record, or None if no body is stored."""
        with self._observe("find"):
            raw = self._store.hgetall(self._keys.record_key(record_id))
            if not raw:
                return None
            return self._codec.decode(raw)

    def find_or_raise(self, record_id: int) -> Attributes:
        """Return the record.

        Raises:
            RecordNotFoundError: If no body is stored.
        """
        record = self.find(record_id)
        if record is None:
            raise RecordNotFoundError(self._table_name, record_id)
        return record

    def find_many(self, record_ids: Iterable[int]) -> list[Attributes | None]:
        """Return records for several ids in one pipelined round trip."""
        with self._observe("find_many"):
            record_ids = list(record_ids)
            if not record_ids:
                return []
            return [
                self._codec.decode(raw) if raw else None
                for raw in self._fetch_bodies(record_ids)
            ]

    def exists(self, record_id: int) -> bool:
        with self._observe("exists"):
            return self._index.contains(record_id)

    def all_exist(self, record_ids: Iterable[int]) -> bool:
        with self._observe("all_exist"):
            return self._index.contains_all(record_ids)

    def count(self) -> int:
        with self._observe("count"):
            return self._index.count()

    def all(self) -> Iterator[Attributes]:
        """Iterate over every record in ascending primary key order.

        Each call walks the index afresh. Bodies are fetched one pipelined
        round trip per batch. A record deleted after its id was read but
        before its body was fetched is skipped.
        """
        for batch in self._index_batches():
            with trace_span(
                "redis_crud.scan_batch",
                {"table": self._table_name, "batch_size": len(batch)},
            ):
                bodies = self._fetch_bodies(batch)

            self._metrics.records_scanned_total.labels(table=self._table_name).inc(len(batch))
            for raw in bodies:
                if raw:
                    yield self._codec.decode(raw)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _reload(self, record_id: RecordId) -> Attributes:
        raw = self._store.hgetall(self._keys.record_key(record_id))
        if not raw:
            raise RecordCorruptionError(
                self._table_name, record_id, "body vanished right after being written"
            )
        return self._codec.decode(raw)

    def _fetch_bodies(self, record_ids: list[int]) -> list[Any]:
        pipe = self._store.pipeline(transaction=False)
        for record_id in record_ids:
            pipe.hgetall(self._keys.record_key(record_id))
        return pipe.execute()

    def _index_batches(self) -> Iterator[list[RecordId]]:
        for batch in self._index.scan_batches(self._scan_batch_size):
            self._metrics.scan_batches_total.labels(table=self._table_name).inc()
            yield batch

    @contextmanager
    def _observe(self, operation: str) -> Generator[None, None, None]:
        start = time.perf_counter()
        status = "error"
        try:
            yield
            status = "success"
        finally:
            self._metrics.operation_latency_seconds.labels(operation=operation).observe(
                time.perf_counter() - start
            )
            self._metrics.operations_total.labels(
                table=self._table_name, operation=operation, status=status
            ).inc()
