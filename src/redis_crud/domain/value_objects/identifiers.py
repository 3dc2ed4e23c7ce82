"""Record identifiers.

Primary keys are plain non-negative integers. ``RecordId`` gives them a
distinct name for type checking without any runtime cost.
"""

from __future__ import annotations

from typing import Any, NewType


RecordId = NewType("RecordId", int)
"""Primary key of a record within one table. Non-negative."""


def validate_record_id(value: Any) -> RecordId:
    """Check that a caller-supplied primary key is usable.

    Args:
        value: The candidate primary key.

    Returns:
        The value as a RecordId.

    Raises:
        TypeError: If value is not an int (bools are rejected).
        ValueError: If value is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Primary key must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Primary key must be non-negative, got {value}")

    return RecordId(value)
