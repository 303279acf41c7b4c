"""
mustache-web

Component-based web UI binding for Mustache templates: server-side
compilation into page markup or head, client-side rendering through
mustache.js, and a JSON conversion helper for the client path.
"""

__version__ = "0.1.0"

from mustache_web.domain.errors import (
    ErrorCode,
    MustacheWebError,
    TemplateError,
    StructuralConflictError,
    ParseError,
    ConfigError,
    ResourceError,
)
from mustache_web.domain.models import (
    Scope,
    ScopedList,
    ScopedMap,
    ScopedObject,
    new_scoped_list,
    new_scoped_map,
    as_scope,
    resolve_template_name,
)
from mustache_web.application.environment import MustacheEnvironment
from mustache_web.application.services import CallbackRegistry, RenderCache
from mustache_web.infrastructure.config import MustacheSettings, load_settings
from mustache_web.infrastructure.serialization import JsonMapper
from mustache_web.infrastructure.template import FileResource, PackageResource, StringResource

__all__ = [
    "__version__",
    "ErrorCode",
    "MustacheWebError",
    "TemplateError",
    "StructuralConflictError",
    "ParseError",
    "ConfigError",
    "ResourceError",
    "Scope",
    "ScopedList",
    "ScopedMap",
    "ScopedObject",
    "new_scoped_list",
    "new_scoped_map",
    "as_scope",
    "resolve_template_name",
    "MustacheEnvironment",
    "CallbackRegistry",
    "RenderCache",
    "MustacheSettings",
    "load_settings",
    "JsonMapper",
    "FileResource",
    "PackageResource",
    "StringResource",
]
