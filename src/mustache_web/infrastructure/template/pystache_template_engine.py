"""
pystache 기반 mustache 엔진 구현

pystache를 사용하여 mustache 템플릿을 컴파일합니다.
HTML 이스케이프는 엔진이 아닌 호출 측의 이스케이프 플래그로만 처리합니다.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

import pystache

from mustache_web.application.ports.template_port import ITemplateEngine, PartialLookup
from mustache_web.domain.errors import ErrorCode, MustacheWebError, handle_error
from mustache_web.domain.models.scope import Scope, ScopedMap, ScopedObject, ScopedList
from mustache_web.infrastructure.logging import get_logger

logger = get_logger(__name__, component="PystacheTemplateEngine")

_MISSING = object()


def _identity(text: str) -> str:
    return text


def _adapt(value: Any) -> Any:
    """스코프 값을 pystache가 해석할 수 있는 뷰로 감싸기 (복사 없음)"""
    if isinstance(value, (_ScopeView, _SequenceView)):
        return value
    if isinstance(value, ScopedList):
        return _SequenceView(value)
    if isinstance(value, Scope):
        return _ScopeView(value)
    if isinstance(value, Mapping):
        return _ScopeView(ScopedMap(value if isinstance(value, dict) else dict(value)))
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, Sequence):
        return _SequenceView(value)
    if value is None or callable(value) or type(value).__module__ == "builtins":
        return value
    return _ScopeView(ScopedObject(value))


class _ScopeView(dict):
    """
    이름 조회를 Scope.get에 위임하는 뷰

    pystache는 dict 컨텍스트에 대해 `key in ctx` 후 `ctx[key]`로 조회하므로
    두 연산을 Scope.get으로 연결합니다. 실제 dict 저장소는 비어 있습니다.
    """

    __slots__ = ("_scope", "_last")

    def __init__(self, scope: Scope):
        super().__init__()
        self._scope = scope
        self._last = (_MISSING, _MISSING)

    def _lookup(self, key: Any) -> Any:
        last_key, last_value = self._last
        if last_key is not _MISSING and last_key == key:
            return last_value
        value = self._scope.get(key, _MISSING)
        self._last = (key, value)
        return value

    def __contains__(self, key: Any) -> bool:
        return self._lookup(key) is not _MISSING

    def __getitem__(self, key: Any) -> Any:
        value = self._lookup(key)
        self._last = (_MISSING, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return _adapt(value)

    def get(self, key: Any, default: Any = None) -> Any:
        value = self._scope.get(key, _MISSING)
        return default if value is _MISSING else _adapt(value)

    def __bool__(self) -> bool:
        if isinstance(self._scope, ScopedMap):
            return len(self._scope) > 0
        return bool(self._scope.unwrap())

    def __len__(self) -> int:
        if isinstance(self._scope, ScopedMap):
            return len(self._scope)
        return 1

    def __str__(self) -> str:
        return str(self._scope.unwrap())

    __repr__ = __str__


class _SequenceView:
    """순회를 항목 단위로 감싸는 시퀀스 뷰"""

    __slots__ = ("_items",)

    def __init__(self, items: Any):
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        items = self._items.iterate() if isinstance(self._items, Scope) else iter(self._items)
        for item in items:
            yield _adapt(item)

    def __str__(self) -> str:
        if isinstance(self._items, Scope):
            return str(self._items.unwrap())
        return str(self._items)


class _PartialLoader:
    """pystache partials 인터페이스 (get(name) → 소스 또는 None)"""

    def __init__(self, lookup: PartialLookup):
        self._lookup = lookup

    def get(self, name: str) -> Optional[str]:
        return self._lookup(name)


class PystacheTemplateEngine(ITemplateEngine):
    """
    pystache 기반 mustache 컴파일 엔진

    Example:
        >>> engine = PystacheTemplateEngine()
        >>> engine.compile("Hello {{name}}!", "greeting", {"name": "World"})
        'Hello World!'
    """

    def __init__(self, missing_tags: str = "ignore", file_encoding: str = "utf-8"):
        """
        Args:
            missing_tags: 누락된 태그 처리 ("ignore" 또는 "strict")
            file_encoding: 템플릿 파일 인코딩
        """
        self.missing_tags = missing_tags
        self.file_encoding = file_encoding

    def _new_renderer(self, partials: Optional[PartialLookup]) -> pystache.Renderer:
        return pystache.Renderer(
            escape=_identity,  # 이스케이프는 호출 측 플래그로 처리
            file_encoding=self.file_encoding,
            missing_tags=self.missing_tags,
            partials=_PartialLoader(partials) if partials is not None else None,
        )

    def compile(
        self,
        source: str,
        template_id: str,
        scope: Any = None,
        partials: Optional[PartialLookup] = None
    ) -> str:
        """
        템플릿 소스를 스코프에 대해 컴파일

        Args:
            source: 템플릿 소스
            template_id: 템플릿 식별자
            scope: 스코프 (None이면 빈 컨텍스트)
            partials: 부분 템플릿 조회 함수

        Returns:
            컴파일된 출력

        Raises:
            TemplateError: 파싱/실행 실패 시
        """
        renderer = self._new_renderer(partials)
        context = () if scope is None else (_adapt(scope),)

        try:
            output = renderer.render(source, *context)
        except MustacheWebError:
            raise
        except Exception as e:
            raise handle_error(
                ErrorCode.TEMPLATE_COMPILE_FAILED,
                original_error=e,
                template_id=template_id
            )

        logger.debug("Template compiled", template_id=template_id, length=len(output))
        return output
