"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the systems a record table depends on:
the Redis command set and the entity schema that classifies attributes.
"""

from redis_crud.ports.outbound.attribute_classifier import AttributeClassifier
from redis_crud.ports.outbound.key_value_store import KeyValuePipeline, KeyValueStore

__all__ = [
    "AttributeClassifier",
    "KeyValuePipeline",
    "KeyValueStore",
]
