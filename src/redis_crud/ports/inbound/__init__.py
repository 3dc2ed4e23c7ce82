"""Inbound ports - API contracts for the record tables.

Inbound ports define the interfaces a unit-of-work layer uses to flush
records and to obtain tables from a driver.
"""

from redis_crud.ports.inbound.crud_driver import (
    ConfigurationError,
    CrudDriver,
    MissingConnectionUrlError,
    NoopTransaction,
    UnsupportedPrimaryKeyError,
)
from redis_crud.ports.inbound.record_table import (
    Attributes,
    RecordAlreadyExistsError,
    RecordCorruptionError,
    RecordNotFoundError,
    RecordTable,
    RecordTableError,
)

__all__ = [
    # CRUD driver
    "ConfigurationError",
    "CrudDriver",
    "MissingConnectionUrlError",
    "NoopTransaction",
    "UnsupportedPrimaryKeyError",
    # Record table
    "Attributes",
    "RecordAlreadyExistsError",
    "RecordCorruptionError",
    "RecordNotFoundError",
    "RecordTable",
    "RecordTableError",
]
