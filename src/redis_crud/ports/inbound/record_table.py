"""Record Table port for single-table CRUD.

This inbound port is the contract a unit-of-work layer flushes through.
Records cross it as plain attribute dicts, never as entity objects.

Consistency model:
- Every operation works on one record (or one batch of a scan) at a time.
- Multi-record atomicity, rollback and dirty tracking belong to the caller.
- A primary key is indexed iff its record body exists. The only transient
  divergence the tables allow is a body without an index entry.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol


Attributes = dict[str, Any]


class RecordTable(Protocol):
    """Protocol for one logical table of integer-keyed records.

    Thread Safety:
        Operations are not isolated from each other. Two callers racing on
        the same primary key can interleave; the caller must serialize them.
    """

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Return the logical table name."""
        ...

    @abstractmethod
    def insert(self, attributes: Mapping[str, Any]) -> Attributes:
        """Store a new record.

        A primary key is allocated from the table sequence when attributes
        do not carry one.

        Args:
            attributes: The record's attributes.

        Returns:
            The record as stored, re-read from the store.

        Raises:
            RecordAlreadyExistsError: If the supplied primary key is in use.
        """
        ...

    @abstractmethod
    def update(self, attributes: Mapping[str, Any]) -> Attributes:
        """Merge attributes into an existing record.

        Attributes not mentioned are left untouched.

        Args:
            attributes: Primary key plus the attributes to change.

        Returns:
            The full record after the update.

        Raises:
            RecordNotFoundError: If the primary key is missing or not stored.
        """
        ...

    @abstractmethod
    def find(self, record_id: int) -> Attributes | None:
        """Return the record, or None if it does not exist."""
        ...

    @abstractmethod
    def find_or_raise(self, record_id: int) -> Attributes:
        """Return the record.

        Raises:
            RecordNotFoundError: If it does not exist.
        """
        ...

    @abstractmethod
    def find_many(self, record_ids: Iterable[int]) -> list[Attributes | None]:
        """Return records for several ids in one round trip.

        Results are aligned with record_ids; missing records are None.
        """
        ...

    @abstractmethod
    def exists(self, record_id: int) -> bool:
        """Return True if the primary key is indexed."""
        ...

    @abstractmethod
    def all_exist(self, record_ids: Iterable[int]) -> bool:
        """Return True if every primary key is indexed."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of indexed records."""
        ...

    @abstractmethod
    def all(self) -> Iterator[Attributes]:
        """Iterate over every record in ascending primary key order.

        Each call starts a fresh walk of the index. The walk is not a
        snapshot: records deleted while it runs may be skipped.
        """
        ...

    @abstractmethod
    def hard_delete(self, record_id: int) -> None:
        """Physically remove a record and its index entry.

        Raises:
            RecordCorruptionError: If the body or the index entry was
                already missing.
        """
        ...

    @abstractmethod
    def hard_delete_all(self) -> int:
        """Remove every record, batch by batch.

        Not atomic. Re-invoking after a failure resumes where it stopped.

        Returns:
            Number of primary keys removed.
        """
        ...


class RecordTableError(Exception):
    """Base error for record table operations."""

    def __init__(self, table_name: str, record_id: Any, message: str) -> None:
        self.table_name = table_name
        self.record_id = record_id
        super().__init__(f"{table_name} record {record_id}: {message}")


class RecordAlreadyExistsError(RecordTableError):
    """Raised when inserting a primary key that is already stored."""

    def __init__(self, table_name: str, record_id: Any) -> None:
        super().__init__(table_name, record_id, "already exists")


class RecordNotFoundError(RecordTableError):
    """Raised when a record required by the operation is not stored."""

    def __init__(self, table_name: str, record_id: Any) -> None:
        super().__init__(table_name, record_id, "does not exist")


class RecordCorruptionError(RecordTableError):
    """Raised when stored data breaks the record/index invariant or cannot
    be decoded. Not recoverable by retrying."""
