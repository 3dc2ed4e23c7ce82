"""Unit tests for RedisSequenceAllocator."""

from __future__ import annotations

import threading

import fakeredis

from redis_crud.adapters.outbound import RedisSequenceAllocator
from redis_crud.domain.value_objects import TableKeys


class TestRedisSequenceAllocator:
    """Tests for the INCR-backed primary key sequence."""

    def test_first_id_is_one(self, redis_client: fakeredis.FakeRedis) -> None:
        allocator = RedisSequenceAllocator(redis_client, TableKeys("users"))

        assert allocator.next_id() == 1

    def test_ids_strictly_increase(self, redis_client: fakeredis.FakeRedis) -> None:
        allocator = RedisSequenceAllocator(redis_client, TableKeys("users"))

        ids = [allocator.next_id() for _ in range(10)]

        assert ids == list(range(1, 11))

    def test_counter_stored_at_sequence_key(self, redis_client: fakeredis.FakeRedis) -> None:
        keys = TableKeys("users", prefix=("test",))
        allocator = RedisSequenceAllocator(redis_client, keys)

        allocator.next_id()
        allocator.next_id()

        assert redis_client.get("test:users$sequence") == "2"

    def test_last_issued(self, redis_client: fakeredis.FakeRedis) -> None:
        allocator = RedisSequenceAllocator(redis_client, TableKeys("users"))

        assert allocator.last_issued() == 0
        allocator.next_id()
        allocator.next_id()
        assert allocator.last_issued() == 2

    def test_tables_have_independent_sequences(
        self, redis_client: fakeredis.FakeRedis
    ) -> None:
        users = RedisSequenceAllocator(redis_client, TableKeys("users"))
        orders = RedisSequenceAllocator(redis_client, TableKeys("orders"))

        users.next_id()
        users.next_id()

        assert orders.next_id() == 1

    def test_allocators_sharing_a_key_never_repeat(
        self, redis_server: fakeredis.FakeServer
    ) -> None:
        """Concurrent allocators on one table get distinct ids."""
        issued: list[int] = []
        lock = threading.Lock()

        def allocate() -> None:
            client = fakeredis.FakeRedis(server=redis_server, decode_responses=True)
            allocator = RedisSequenceAllocator(client, TableKeys("users"))
            for _ in range(25):
                record_id = allocator.next_id()
                with lock:
                    issued.append(record_id)

        threads = [threading.Thread(target=allocate) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(issued) == list(range(1, 101))
