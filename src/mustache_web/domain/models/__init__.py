"""
Domain Models

스코프 래퍼와 템플릿 이름 규칙
"""

from .scope import (
    Scope,
    ScopedList,
    ScopedMap,
    ScopedObject,
    new_scoped_list,
    new_scoped_map,
    as_scope,
)
from .template import (
    TEMPLATE_EXTENSION,
    DATA_TEMPLATE_ATTRIBUTE,
    resolve_template_name,
)

__all__ = [
    "Scope",
    "ScopedList",
    "ScopedMap",
    "ScopedObject",
    "new_scoped_list",
    "new_scoped_map",
    "as_scope",
    "TEMPLATE_EXTENSION",
    "DATA_TEMPLATE_ATTRIBUTE",
    "resolve_template_name",
]
