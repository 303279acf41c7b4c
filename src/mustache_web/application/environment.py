"""
MustacheEnvironment

프로세스 시작 시 한 번 생성하여 페이지, 패널, 라우트에 참조로 전달하는
컴파일 설정 객체입니다. 전역 싱글턴을 대신합니다.
"""

from typing import Any, Optional, Union

from mustache_web.application.ports.template_port import ITemplateEngine, ITemplateResource
from mustache_web.application.services.callback_registry import CallbackRegistry
from mustache_web.domain.errors import ErrorCode, ResourceError, handle_error
from mustache_web.infrastructure.config import MustacheSettings
from mustache_web.infrastructure.logging import get_logger
from mustache_web.infrastructure.serialization import JsonMapper, default_mapper
from mustache_web.infrastructure.template import (
    PystacheTemplateEngine,
    StringResource,
    escape_markup,
    read_string,
)

logger = get_logger(__name__, component="MustacheEnvironment")


class MustacheEnvironment:
    """
    mustache 컴파일 환경

    Attributes:
        settings: mustache-web 설정
        engine: mustache 엔진 (ITemplateEngine)
        json_mapper: 클라이언트 렌더링용 JSON 변환 헬퍼
        callbacks: AJAX 콜백 레지스트리

    Example:
        >>> env = MustacheEnvironment()
        >>> env.compile("Hello {{name}}!", "greeting", {"name": "<b>"}, escape_html=True)
        'Hello &lt;b&gt;!'
    """

    def __init__(
        self,
        settings: Optional[MustacheSettings] = None,
        engine: Optional[ITemplateEngine] = None,
        json_mapper: Optional[JsonMapper] = None,
        callbacks: Optional[CallbackRegistry] = None
    ):
        self.settings = settings or MustacheSettings()
        self.engine = engine or PystacheTemplateEngine(
            missing_tags=self.settings.missing_tags,
            file_encoding=self.settings.file_encoding
        )
        self.json_mapper = json_mapper or default_mapper
        self.callbacks = callbacks or CallbackRegistry(self.settings.max_callbacks)

        logger.info(
            "MustacheEnvironment initialized",
            engine=type(self.engine).__name__,
            missing_tags=self.settings.missing_tags
        )

    def load_source(self, resource: Optional[ITemplateResource], template_id: Optional[str] = None) -> str:
        """
        템플릿 소스 로드

        Args:
            resource: 템플릿 리소스
            template_id: 에러 메시지용 식별자 (None이면 리소스 이름)

        Returns:
            템플릿 소스

        Raises:
            TemplateError: 리소스가 없거나 읽을 수 없는 경우
        """
        if template_id is None:
            template_id = resource.name if resource is not None else "<none>"

        try:
            return read_string(resource)
        except (ResourceError, ValueError) as e:
            raise handle_error(
                ErrorCode.TEMPLATE_NOT_FOUND,
                original_error=e,
                template_id=template_id
            )

    def compile(
        self,
        resource_or_source: Union[ITemplateResource, str],
        template_id: str,
        data: Any = None,
        escape_html: bool = False
    ) -> str:
        """
        템플릿 컴파일

        Args:
            resource_or_source: 템플릿 리소스 또는 소스 문자열
            template_id: 템플릿 식별자
            data: 스코프
            escape_html: 출력 전체 HTML 이스케이프 여부

        Returns:
            컴파일된 출력

        Raises:
            TemplateError: 로드/컴파일 실패 시 (template_id 포함)
        """
        if isinstance(resource_or_source, str):
            resource = StringResource(resource_or_source, name=template_id)
        else:
            resource = resource_or_source

        source = self.load_source(resource, template_id)

        def lookup_partial(name: str) -> Optional[str]:
            partial = resource.resolve_partial(name)
            if partial is None:
                return None
            try:
                return read_string(partial)
            except (ResourceError, ValueError):
                logger.debug("Partial not found", template_id=template_id, partial=name)
                return None

        output = self.engine.compile(source, template_id, data, partials=lookup_partial)
        if escape_html:
            output = escape_markup(output)
        return output

    def mustache_js_url(self) -> str:
        """설정된 mustache.js 스크립트 URL"""
        return self.settings.mustache_js_src()
