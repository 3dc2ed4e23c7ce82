"""Domain services for record table logic.

Services implement logic that doesn't naturally fit within a single entity
or value object.
"""

from redis_crud.domain.services.attribute_codec import AttributeCodec

__all__ = [
    "AttributeCodec",
]
