"""Domain entities for the record tables.

Exports:
    Schema:
        - AttributeKind: Declared attribute types, primitive or structured
        - TableSchema: Table name, primary key and attribute kinds
"""

from redis_crud.domain.entities.table_schema import AttributeKind, TableSchema

__all__ = [
    "AttributeKind",
    "TableSchema",
]
