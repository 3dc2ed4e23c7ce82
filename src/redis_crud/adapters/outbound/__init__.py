"""Outbound adapters - implementations of outbound-facing ports on Redis.

These adapters turn the record table contract into Redis commands: the
connection opener, the primary key sequence and index, the record table
itself and the driver that hands tables out.
"""

from redis_crud.adapters.outbound.primary_key_index import (
    DEFAULT_SCAN_BATCH_SIZE,
    RedisPrimaryKeyIndex,
)
from redis_crud.adapters.outbound.redis_connection import (
    REDIS_URL_ENV_VAR,
    get_default_connection,
    open_connection,
    reset_default_connection,
    set_default_connection,
)
from redis_crud.adapters.outbound.redis_crud_driver import RedisCrudDriver
from redis_crud.adapters.outbound.redis_record_table import RedisRecordTable
from redis_crud.adapters.outbound.sequence_allocator import RedisSequenceAllocator

__all__ = [
    "DEFAULT_SCAN_BATCH_SIZE",
    "REDIS_URL_ENV_VAR",
    "RedisCrudDriver",
    "RedisPrimaryKeyIndex",
    "RedisRecordTable",
    "RedisSequenceAllocator",
    "get_default_connection",
    "open_connection",
    "reset_default_connection",
    "set_default_connection",
]
