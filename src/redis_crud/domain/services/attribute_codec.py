"""Attribute codec between record dicts and Redis hash fields.

Redis hash fields hold scalars only. Attributes the schema declares as
structured are written as compact JSON text and parsed back on read.
Booleans are written as ``"true"``/``"false"`` and dates and datetimes as
ISO-8601 text, since redis-py refuses both types; other scalars pass through.

On read, field names come back as ``str`` (bytes replies are decoded as
UTF-8) and the primary key as ``int``. Other scalars keep Redis' text form
and are cast by the entity layer.

Which attributes are structured is asked of the classifier once, when the
codec is built, and never again.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date
from typing import Any

from redis_crud.ports.inbound.record_table import Attributes, RecordCorruptionError
from redis_crud.ports.outbound.attribute_classifier import AttributeClassifier


class AttributeCodec:
    """Encodes and decodes the attributes of one table."""

    def __init__(self, classifier: AttributeClassifier) -> None:
        self._table_name = classifier.table_name
        self._primary_key_attribute = classifier.primary_key_attribute
        self._json_attributes = frozenset(
            name for name in classifier.attribute_names if classifier.requires_encoding(name)
        )

    @property
    def json_attributes(self) -> frozenset[str]:
        """Names of the attributes stored as JSON text."""
        return self._json_attributes

    def encode(self, attributes: Mapping[str, Any]) -> Attributes:
        """Return a copy of attributes ready for HSET.

        None values are kept; the table decides whether they clear a field.
        """
        encoded: Attributes = {}
        for name, value in attributes.items():
            if value is not None and name in self._json_attributes:
                encoded[name] = json.dumps(value, separators=(",", ":"))
            else:
                encoded[name] = _scalar(value)
        return encoded

    def decode(self, raw: Mapping[Any, Any]) -> Attributes:
        """Turn an HGETALL reply back into a record dict.

        Raises:
            RecordCorruptionError: If a JSON attribute holds malformed text
                or the primary key is not an integer.
        """
        record: Attributes = {_text(name): _text(value) for name, value in raw.items()}

        record_id = record.get(self._primary_key_attribute)
        if record_id is not None:
            try:
                record[self._primary_key_attribute] = int(record_id)
            except ValueError as exc:
                raise RecordCorruptionError(
                    self._table_name, record_id, "stored primary key is not an integer"
                ) from exc

        for name in self._json_attributes.intersection(record):
            try:
                record[name] = json.loads(record[name])
            except json.JSONDecodeError as exc:
                raise RecordCorruptionError(
                    self._table_name,
                    record.get(self._primary_key_attribute),
                    f"attribute {name!r} holds malformed JSON: {exc}",
                ) from exc

        return record


def _scalar(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return value


def _text(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value
