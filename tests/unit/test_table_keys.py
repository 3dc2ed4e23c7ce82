"""Unit tests for domain value objects - keys and identifiers."""

from __future__ import annotations

import pytest

from redis_crud.domain.value_objects import (
    RecordId,
    TableKeys,
    normalize_prefix,
    validate_record_id,
)


class TestTableKeys:
    """Tests for the table key namer."""

    def test_keys_without_prefix(self) -> None:
        """Keys are derived from the table name alone."""
        keys = TableKeys("users")

        assert keys.entity_key_prefix == "users"
        assert keys.sequence_key == "users$sequence"
        assert keys.index_key == "users$all"
        assert keys.record_key(5) == "users:5"

    def test_keys_with_multi_segment_prefix(self) -> None:
        """Prefix segments are joined before the table name."""
        keys = TableKeys("users", prefix=("prod", "tenant1"))

        assert keys.entity_key_prefix == "prod:tenant1:users"
        assert keys.sequence_key == "prod:tenant1:users$sequence"
        assert keys.index_key == "prod:tenant1:users$all"
        assert keys.record_key(101) == "prod:tenant1:users:101"

    def test_equal_identity_gives_equal_keys(self) -> None:
        """Table identity is (prefix, name)."""
        assert TableKeys("users", ("a",)) == TableKeys("users", ("a",))
        assert TableKeys("users", ("a",)) != TableKeys("users", ("b",))

    def test_empty_table_name_rejected(self) -> None:
        """A table needs a name."""
        with pytest.raises(ValueError, match="table_name"):
            TableKeys("")

    def test_immutable(self) -> None:
        """Keys cannot be re-pointed after construction."""
        keys = TableKeys("users")
        with pytest.raises(AttributeError):
            keys.table_name = "other"  # type: ignore[misc]


class TestNormalizePrefix:
    """Tests for prefix normalization."""

    def test_none(self) -> None:
        assert normalize_prefix(None) == ()

    def test_single_string_is_one_segment(self) -> None:
        assert normalize_prefix("staging") == ("staging",)

    def test_iterable(self) -> None:
        assert normalize_prefix(["prod", "tenant1"]) == ("prod", "tenant1")


class TestValidateRecordId:
    """Tests for caller-supplied primary keys."""

    def test_accepts_non_negative_int(self) -> None:
        assert validate_record_id(0) == RecordId(0)
        assert validate_record_id(101) == 101

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            validate_record_id(-1)

    @pytest.mark.parametrize("value", ["1", 1.0, True, None])
    def test_rejects_non_int(self, value: object) -> None:
        with pytest.raises(TypeError, match="must be an int"):
            validate_record_id(value)
