"""Attribute schema for a record table.

The schema is owned by the entity/type system. This module provides a small
concrete description that satisfies the AttributeClassifier port so tables
can be built without a full entity framework.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class AttributeKind(Enum):
    """Declared type of an attribute.

    Primitive kinds map onto Redis scalars. Structured kinds (arrays, models,
    mappings and free-form "duck" values) have no scalar form and are stored
    as JSON text.
    """

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    SYMBOL = "symbol"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    ARRAY = "array"
    MODEL = "model"
    MAPPING = "mapping"
    DUCK = "duck"

    @property
    def is_structured(self) -> bool:
        """True if values of this kind need JSON encoding."""
        return self in _STRUCTURED_KINDS


_STRUCTURED_KINDS = frozenset(
    {AttributeKind.ARRAY, AttributeKind.MODEL, AttributeKind.MAPPING, AttributeKind.DUCK}
)


@dataclass(frozen=True)
class TableSchema:
    """Table name, primary key and declared attribute kinds.

    Example:
        >>> schema = TableSchema(
        ...     table_name="some_entity",
        ...     attributes={"id": AttributeKind.INTEGER, "tags": AttributeKind.ARRAY},
        ... )
        >>> schema.requires_encoding("tags")
        True
    """

    table_name: str
    attributes: Mapping[str, AttributeKind]
    primary_key_attribute: str = "id"

    def __post_init__(self) -> None:
        """Freeze the attribute mapping and check the primary key is declared."""
        if self.primary_key_attribute not in self.attributes:
            raise ValueError(
                f"Primary key {self.primary_key_attribute!r} is not an attribute "
                f"of {self.table_name!r}"
            )
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def primary_key_type(self) -> AttributeKind:
        return self.attributes[self.primary_key_attribute]

    @property
    def attribute_names(self) -> tuple[str, ...]:
        return tuple(self.attributes)

    def kind_of(self, attribute_name: str) -> AttributeKind | None:
        """Return the declared kind of an attribute, or None if undeclared."""
        return self.attributes.get(attribute_name)

    def requires_encoding(self, attribute_name: str) -> bool:
        kind = self.kind_of(attribute_name)
        return kind is not None and kind.is_structured
