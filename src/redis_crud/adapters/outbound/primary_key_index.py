"""Primary key index backed by a Redis sorted set.

Each live primary key is a member of the set with itself as score, so the
members sort numerically and "the next k ids above a cursor" is a single
ZRANGEBYSCORE with LIMIT. Full scans page with that query instead of an
offset, which keeps them correct while earlier ids are being deleted.

References:
    - https://redis.io/docs/latest/commands/zrangebyscore/
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from redis_crud.domain.value_objects import RecordId, TableKeys
from redis_crud.ports.outbound.key_value_store import KeyValueStore


DEFAULT_SCAN_BATCH_SIZE = 50


class RedisPrimaryKeyIndex:
    """Ordered set of the live primary keys of one table."""

    def __init__(self, store: KeyValueStore, keys: TableKeys) -> None:
        self._store = store
        self._key = keys.index_key

    @property
    def key(self) -> str:
        return self._key

    def add(self, record_id: int) -> None:
        self._store.zadd(self._key, {record_id: record_id})

    def remove(self, record_id: int) -> bool:
        """Remove a primary key; returns whether it was present."""
        return self._store.zrem(self._key, record_id) == 1

    def contains(self, record_id: int) -> bool:
        return self._store.zscore(self._key, record_id) is not None

    def contains_all(self, record_ids: Iterable[int]) -> bool:
        """Check several primary keys in one round trip.

        Returns True for an empty input.
        """
        record_ids = list(record_ids)
        if not record_ids:
            return True

        pipe = self._store.pipeline(transaction=False)
        for record_id in record_ids:
            pipe.zscore(self._key, record_id)
        return all(score is not None for score in pipe.execute())

    def count(self) -> int:
        return int(self._store.zcard(self._key))

    def scan_batches(self, batch_size: int = DEFAULT_SCAN_BATCH_SIZE) -> Iterator[list[RecordId]]:
        """Yield the indexed primary keys in ascending batches.

        Each batch holds up to batch_size ids, all greater than the last id
        of the previous batch. The generator stops at the first empty batch.

        Args:
            batch_size: Maximum ids per batch (one round trip each).

        Raises:
            ValueError: If batch_size < 1.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")

        lower_bound = 0
        while True:
            members = self._store.zrangebyscore(
                self._key, lower_bound, "+inf", start=0, num=batch_size
            )
            if not members:
                return

            batch = [RecordId(int(member)) for member in members]
            yield batch

            lower_bound = batch[-1] + 1
