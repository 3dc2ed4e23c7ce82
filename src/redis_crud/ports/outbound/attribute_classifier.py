"""Attribute classifier port.

The record table never owns an entity schema. It asks this port for the
primary key and for which attributes have no Redis scalar form and must be
stored as JSON text. TableSchema is the bundled implementation; an entity
framework can supply its own.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from redis_crud.domain.entities.table_schema import AttributeKind


class AttributeClassifier(Protocol):
    """Protocol for the schema facts a record table depends on."""

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Return the logical table name."""
        ...

    @property
    @abstractmethod
    def primary_key_attribute(self) -> str:
        """Return the name of the primary key attribute."""
        ...

    @property
    @abstractmethod
    def primary_key_type(self) -> AttributeKind:
        """Return the declared kind of the primary key.

        Only AttributeKind.INTEGER is supported by the Redis tables.
        """
        ...

    @property
    @abstractmethod
    def attribute_names(self) -> tuple[str, ...]:
        """Return every declared attribute name, primary key included."""
        ...

    @abstractmethod
    def requires_encoding(self, attribute_name: str) -> bool:
        """Return True if the attribute holds structured values.

        The answer must not change over the lifetime of the table.
        """
        ...
