"""Redis key layout for a record table.

Every key a table touches is derived from its prefix path and table name:

    <prefix>:<table>$sequence   last issued primary key (INCR counter)
    <prefix>:<table>$all        sorted set of live primary keys, score = id
    <prefix>:<table>:<id>       hash holding one record's attributes
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import cached_property


KEY_SEPARATOR = ":"
SEQUENCE_SUFFIX = "$sequence"
INDEX_SUFFIX = "$all"


def normalize_prefix(prefix: str | Iterable[str] | None) -> tuple[str, ...]:
    """Turn a prefix argument into a tuple of key segments.

    ``None`` means no prefix, a string is a single segment, and any other
    iterable supplies the segments in order.
    """
    if prefix is None:
        return ()
    if isinstance(prefix, str):
        return (prefix,)
    return tuple(prefix)


@dataclass(frozen=True)
class TableKeys:
    """Key namer for one table.

    Example:
        >>> keys = TableKeys("users", prefix=("prod", "tenant1"))
        >>> keys.entity_key_prefix
        'prod:tenant1:users'
        >>> keys.record_key(7)
        'prod:tenant1:users:7'
    """

    table_name: str
    prefix: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate the table name."""
        if not self.table_name:
            raise ValueError("table_name must be a non-empty string")

    @cached_property
    def entity_key_prefix(self) -> str:
        return KEY_SEPARATOR.join([*self.prefix, self.table_name])

    @cached_property
    def sequence_key(self) -> str:
        return f"{self.entity_key_prefix}{SEQUENCE_SUFFIX}"

    @cached_property
    def index_key(self) -> str:
        return f"{self.entity_key_prefix}{INDEX_SUFFIX}"

    def record_key(self, record_id: int) -> str:
        """Return the hash key holding the record with this id."""
        return f"{self.entity_key_prefix}{KEY_SEPARATOR}{record_id}"
