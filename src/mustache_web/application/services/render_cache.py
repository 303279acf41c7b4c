"""
렌더 캐시

렌더 사이클마다 템플릿을 한 번만 컴파일하고 결과를 보관합니다.
사이클이 끝나면(detach 또는 cycle() 종료) 슬롯을 비웁니다.
사이클 간 캐싱은 하지 않습니다.
"""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional

from mustache_web.application.ports.template_port import ITemplateResource
from mustache_web.domain.errors import ErrorCode, handle_error
from mustache_web.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from mustache_web.application.environment import MustacheEnvironment

logger = get_logger(__name__, component="RenderCache")


class RenderCache:
    """
    컴포넌트 전용 컴파일 결과 캐시 슬롯

    Attributes:
        environment: 컴파일에 사용할 MustacheEnvironment
        resource_factory: 템플릿 리소스 생성 함수 (첫 렌더링 시 호출)
        template_id: 템플릿 식별자
        guard: True를 반환하면 구조 충돌 (자식 컴포넌트 존재)

    Example:
        >>> cache = RenderCache(env, lambda: StringResource("Hello {{name}}!"), "greeting")
        >>> with cache.cycle():
        ...     cache.render({"name": "World"})
        'Hello World!'
    """

    def __init__(
        self,
        environment: "MustacheEnvironment",
        resource_factory: Callable[[], ITemplateResource],
        template_id: str,
        guard: Optional[Callable[[], bool]] = None
    ):
        self.environment = environment
        self.resource_factory = resource_factory
        self.template_id = template_id
        self.guard = guard
        self._output: Optional[str] = None

    @property
    def is_cached(self) -> bool:
        """현재 사이클의 컴파일 결과가 있는지 여부"""
        return self._output is not None

    def render(self, scope: Any, escape: bool = False) -> str:
        """
        컴파일된 출력 반환 (사이클당 한 번 컴파일)

        Args:
            scope: 스코프 (첫 호출에서만 사용)
            escape: HTML 이스케이프 여부

        Returns:
            컴파일된 출력 (같은 사이클에서는 동일한 문자열)

        Raises:
            StructuralConflictError: 자식 컴포넌트가 존재하는 경우 (컴파일 전)
            TemplateError: 로드/컴파일 실패 시 (캐시하지 않음)
        """
        if self.guard is not None and self.guard():
            raise handle_error(ErrorCode.STRUCTURAL_CONFLICT, component_id=self.template_id)

        if self._output is not None:
            return self._output

        resource = self.resource_factory()
        if resource is None:
            raise handle_error(
                ErrorCode.TEMPLATE_NOT_FOUND,
                template_id=self.template_id,
                error="template resource is None"
            )

        self._output = self.environment.compile(
            resource,
            self.template_id,
            data=scope,
            escape_html=escape
        )
        logger.debug("Compiled output cached", template_id=self.template_id)
        return self._output

    def clear(self) -> None:
        """캐시 슬롯 비우기"""
        if self._output is not None:
            logger.debug("Compiled output discarded", template_id=self.template_id)
        self._output = None

    @contextmanager
    def cycle(self) -> Iterator["RenderCache"]:
        """
        렌더 사이클 범위

        종료 시(에러 포함) 슬롯을 비웁니다.
        """
        try:
            yield self
        finally:
            self.clear()
