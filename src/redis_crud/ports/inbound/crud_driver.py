"""CRUD driver port.

A driver owns one store connection and hands out a record table per entity
table. It also exposes the transaction hooks a unit-of-work layer calls
around a flush. The Redis driver implements them as no-ops: Redis MULTI does
not roll back like a database transaction, so atomicity stays with the
caller.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Protocol

from redis_crud.ports.inbound.record_table import RecordTable
from redis_crud.ports.outbound.attribute_classifier import AttributeClassifier


_transaction_ids = count(1)


@dataclass(frozen=True)
class NoopTransaction:
    """Inert token returned by drivers without transaction support."""

    transaction_id: int = field(default_factory=lambda: next(_transaction_ids))


class CrudDriver(Protocol):
    """Protocol for a storage driver serving several record tables."""

    @property
    @abstractmethod
    def raw_connection(self) -> Any:
        """Return the underlying store connection."""
        ...

    @abstractmethod
    def table(self, schema: AttributeClassifier) -> RecordTable:
        """Return the record table for a schema, creating it on first use.

        Raises:
            UnsupportedPrimaryKeyError: If the schema's primary key is not
                an integer.
        """
        ...

    @abstractmethod
    def open_transaction(self) -> NoopTransaction:
        """Begin a unit of work."""
        ...

    @abstractmethod
    def close_transaction(self, transaction: NoopTransaction) -> None:
        """End a unit of work after its writes were flushed."""
        ...

    @abstractmethod
    def rollback_transaction(self, transaction: NoopTransaction) -> None:
        """Abandon a unit of work."""
        ...


class ConfigurationError(Exception):
    """Raised when a driver or table cannot be set up as requested."""


class MissingConnectionUrlError(ConfigurationError):
    """Raised when no credentials are given and REDIS_URL is not set."""


class UnsupportedPrimaryKeyError(ConfigurationError):
    """Raised when a table's primary key is not an integer."""

    def __init__(self, table_name: str, primary_key_type: Any) -> None:
        self.table_name = table_name
        self.primary_key_type = primary_key_type
        super().__init__(
            f"Only integer primary keys are supported, {table_name!r} declares "
            f"{primary_key_type}"
        )
