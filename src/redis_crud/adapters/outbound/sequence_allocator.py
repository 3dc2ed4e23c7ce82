"""Primary key sequence backed by a Redis counter."""

from __future__ import annotations

from redis_crud.domain.value_objects import RecordId, TableKeys
from redis_crud.ports.outbound.key_value_store import KeyValueStore


class RedisSequenceAllocator:
    """Issues strictly increasing primary keys for one table.

    Each id comes from a single INCR, so concurrent callers sharing the
    Redis server never receive the same value. Ids supplied explicitly to
    an insert do not move the counter.
    """

    def __init__(self, store: KeyValueStore, keys: TableKeys) -> None:
        self._store = store
        self._key = keys.sequence_key

    def next_id(self) -> RecordId:
        """Increment the counter and return the new value."""
        return RecordId(int(self._store.incr(self._key)))

    def last_issued(self) -> RecordId:
        """Return the last id issued, 0 if the sequence was never used."""
        value = self._store.get(self._key)
        return RecordId(int(value) if value is not None else 0)
