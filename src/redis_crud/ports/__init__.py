"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to callers (RecordTable, CrudDriver)
- Outbound ports: Dependencies on external systems (KeyValueStore,
  AttributeClassifier)

Adapters implement these ports with concrete functionality.
"""

from redis_crud.ports.inbound import (
    Attributes,
    ConfigurationError,
    CrudDriver,
    MissingConnectionUrlError,
    NoopTransaction,
    RecordAlreadyExistsError,
    RecordCorruptionError,
    RecordNotFoundError,
    RecordTable,
    RecordTableError,
    UnsupportedPrimaryKeyError,
)
from redis_crud.ports.outbound import AttributeClassifier, KeyValuePipeline, KeyValueStore

__all__ = [
    # Inbound ports
    "Attributes",
    "ConfigurationError",
    "CrudDriver",
    "MissingConnectionUrlError",
    "NoopTransaction",
    "RecordAlreadyExistsError",
    "RecordCorruptionError",
    "RecordNotFoundError",
    "RecordTable",
    "RecordTableError",
    "UnsupportedPrimaryKeyError",
    # Outbound ports
    "AttributeClassifier",
    "KeyValuePipeline",
    "KeyValueStore",
]
