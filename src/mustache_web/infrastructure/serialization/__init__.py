"""
Serialization Infrastructure

JSON 변환 헬퍼 (pydantic + 관대한 파서)
"""

from .json_mapper import (
    JsonMapper,
    default_mapper,
    to_json,
    from_json,
    parse,
    stringify,
    is_valid,
    new_object,
    add_serializer,
)

__all__ = [
    "JsonMapper",
    "default_mapper",
    "to_json",
    "from_json",
    "parse",
    "stringify",
    "is_valid",
    "new_object",
    "add_serializer",
]
