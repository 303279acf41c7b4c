"""
Host component model and mustache panels/behaviors
"""

from .base import (
    Model,
    LoadableDetachableModel,
    wrap_model,
    Behavior,
    AttributeModifier,
    HeaderItem,
    JavaScriptReferenceHeaderItem,
    OnDomReadyHeaderItem,
    StringHeaderItem,
    HeaderResponse,
    Component,
    Page,
)
from .behaviors import MustacheTemplate, MustacheTemplateAppender
from .panels import (
    MustachePanel,
    ClientSideMustachePanel,
    LazyLoadingClientSideMustachePanel,
    new_mustache_template_panel,
)
from .resources import MustacheJsReference
from .scripts import create_render_script, on_dom_ready, create_lazy_load_script

__all__ = [
    "Model",
    "LoadableDetachableModel",
    "wrap_model",
    "Behavior",
    "AttributeModifier",
    "HeaderItem",
    "JavaScriptReferenceHeaderItem",
    "OnDomReadyHeaderItem",
    "StringHeaderItem",
    "HeaderResponse",
    "Component",
    "Page",
    "MustacheTemplate",
    "MustacheTemplateAppender",
    "MustachePanel",
    "ClientSideMustachePanel",
    "LazyLoadingClientSideMustachePanel",
    "new_mustache_template_panel",
    "MustacheJsReference",
    "create_render_script",
    "on_dom_ready",
    "create_lazy_load_script",
]
