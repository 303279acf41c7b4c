"""
클라이언트 엔진 참조

MustacheJsReference: mustache.js 스크립트 참조 (자산 번들링/서빙은 하지 않음)
"""

from typing import Optional

from mustache_web.infrastructure.config import MustacheSettings
from .base import JavaScriptReferenceHeaderItem


class MustacheJsReference:
    """
    mustache.js 스크립트 참조

    Args:
        version: mustache.js 버전 (None이면 설정값)
        url_pattern: "{version}" 자리표시자를 가진 URL 패턴 (None이면 설정값)
    """

    def __init__(
        self,
        version: Optional[str] = None,
        url_pattern: Optional[str] = None,
        settings: Optional[MustacheSettings] = None
    ):
        settings = settings or MustacheSettings()
        self.version = version or settings.mustache_js_version
        self.url_pattern = url_pattern or settings.mustache_js_url

    @classmethod
    def from_settings(cls, settings: MustacheSettings) -> "MustacheJsReference":
        return cls(settings=settings)

    @property
    def url(self) -> str:
        return self.url_pattern.format(version=self.version)

    def header_item(self) -> JavaScriptReferenceHeaderItem:
        return JavaScriptReferenceHeaderItem(self.url)

    def __repr__(self) -> str:
        return f"MustacheJsReference(version={self.version!r})"
