"""Key-value store port.

The subset of Redis commands the record tables issue. ``redis.Redis`` (and
``fakeredis.FakeRedis`` in tests) satisfy it structurally.

References:
    - https://redis.io/docs/latest/commands/
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol


class KeyValuePipeline(Protocol):
    """Commands buffered client-side and sent in one round trip.

    Commands queue in the order issued; ``execute`` returns their replies in
    the same order. A pipeline is not a transaction: a failure part-way
    through can leave earlier commands applied.
    """

    @abstractmethod
    def hgetall(self, name: str) -> Any: ...

    @abstractmethod
    def delete(self, *names: str) -> Any: ...

    @abstractmethod
    def zrem(self, name: str, *values: Any) -> Any: ...

    @abstractmethod
    def zscore(self, name: str, value: Any) -> Any: ...

    @abstractmethod
    def execute(self) -> list[Any]:
        """Send the buffered commands and return their replies."""
        ...


class KeyValueStore(Protocol):
    """Protocol for the Redis commands used by record tables."""

    @abstractmethod
    def incr(self, name: str, amount: int = 1) -> int:
        """Atomically increment a counter and return the new value."""
        ...

    @abstractmethod
    def get(self, name: str) -> Any:
        """Return a string value, or None if the key is missing."""
        ...

    @abstractmethod
    def hset(
        self,
        name: str,
        key: Any = None,
        value: Any = None,
        mapping: Mapping[Any, Any] | None = None,
    ) -> int:
        """Set fields of a hash; returns the number of fields added."""
        ...

    @abstractmethod
    def hdel(self, name: str, *keys: str) -> int:
        """Delete fields of a hash; returns the number removed."""
        ...

    @abstractmethod
    def hgetall(self, name: str) -> dict[Any, Any]:
        """Return every field of a hash (empty if the key is missing)."""
        ...

    @abstractmethod
    def delete(self, *names: str) -> int:
        """Delete keys; returns the number that existed."""
        ...

    @abstractmethod
    def zadd(self, name: str, mapping: Mapping[Any, float]) -> int:
        """Add members to a sorted set with the given scores."""
        ...

    @abstractmethod
    def zrem(self, name: str, *values: Any) -> int:
        """Remove members from a sorted set; returns the number removed."""
        ...

    @abstractmethod
    def zscore(self, name: str, value: Any) -> float | None:
        """Return a member's score, or None if it is not in the set."""
        ...

    @abstractmethod
    def zcard(self, name: str) -> int:
        """Return the number of members of a sorted set."""
        ...

    @abstractmethod
    def zrangebyscore(
        self,
        name: str,
        min: float | str,
        max: float | str,
        start: int | None = None,
        num: int | None = None,
    ) -> list[Any]:
        """Return members with scores in [min, max], ascending, paginated."""
        ...

    @abstractmethod
    def pipeline(self, transaction: bool = True) -> KeyValuePipeline:
        """Return a pipeline for batching commands."""
        ...
