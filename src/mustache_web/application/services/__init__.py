"""
Application Services

렌더 캐시, AJAX 콜백 레지스트리
"""

from .callback_registry import CallbackRegistry
from .render_cache import RenderCache

__all__ = [
    "CallbackRegistry",
    "RenderCache",
]
