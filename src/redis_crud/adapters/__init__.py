"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations. There are no inbound adapters:
callers use the record tables in-process through the ports.
"""

from redis_crud.adapters.outbound import (
    RedisCrudDriver,
    RedisPrimaryKeyIndex,
    RedisRecordTable,
    RedisSequenceAllocator,
)

__all__ = [
    # Outbound adapters
    "RedisCrudDriver",
    "RedisPrimaryKeyIndex",
    "RedisRecordTable",
    "RedisSequenceAllocator",
]
