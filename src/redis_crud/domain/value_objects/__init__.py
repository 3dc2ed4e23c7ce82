"""Value objects for the record table domain.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Identifiers:
        - RecordId: Type-safe primary key
        - validate_record_id: Check a caller-supplied primary key

    Keys:
        - TableKeys: Redis key namer for one table
        - normalize_prefix: Prefix argument to key segments
"""

from redis_crud.domain.value_objects.identifiers import RecordId, validate_record_id
from redis_crud.domain.value_objects.table_keys import (
    INDEX_SUFFIX,
    KEY_SEPARATOR,
    SEQUENCE_SUFFIX,
    TableKeys,
    normalize_prefix,
)

__all__ = [
    # Identifiers
    "RecordId",
    "validate_record_id",
    # Keys
    "INDEX_SUFFIX",
    "KEY_SEPARATOR",
    "SEQUENCE_SUFFIX",
    "TableKeys",
    "normalize_prefix",
]
