"""
mustache 패널

MustachePanel: 서버 측 렌더링 (컴파일 결과를 본문으로 출력)
ClientSideMustachePanel: 클라이언트 측 렌더링 (data-template + DOM 준비 스크립트)
LazyLoadingClientSideMustachePanel: AJAX 콜백으로 지연 렌더링
"""

from typing import Any, Optional

from mustache_web.application.ports.template_port import ITemplateResource
from mustache_web.application.services.render_cache import RenderCache
from mustache_web.domain.errors import ErrorCode, handle_error
from mustache_web.domain.models.template import DATA_TEMPLATE_ATTRIBUTE
from mustache_web.infrastructure.logging import get_logger
from .base import (
    AttributeModifier,
    Component,
    HeaderResponse,
    JavaScriptReferenceHeaderItem,
    LoadableDetachableModel,
    Model,
    OnDomReadyHeaderItem,
)
from .resources import MustacheJsReference
from .scripts import create_lazy_load_script, create_render_script

logger = get_logger(__name__, component="MustachePanel")


class MustachePanel(Component):
    """
    서버 측 mustache 패널

    모델 객체를 스코프로 템플릿을 컴파일하고 결과를 본문으로 출력합니다.
    렌더 사이클마다 한 번만 컴파일하며, 자식 컴포넌트를 가질 수 없습니다.

    Attributes:
        template_resource: 템플릿 리소스 (new_template_resource 재정의로 대체 가능)
    """

    def __init__(
        self,
        component_id: str,
        model: Any = None,
        template_resource: Optional[ITemplateResource] = None,
        escape_html: Optional[bool] = None
    ):
        super().__init__(component_id, model)
        self.template_resource = template_resource
        self._escape_html = Model(escape_html)
        self._render_cache: Optional[RenderCache] = None

    def is_escape_html(self) -> bool:
        """HTML 이스케이프 여부 (지정하지 않으면 설정 escape_html)"""
        escape_html = self._escape_html.get_object()
        if escape_html is None:
            return self.get_page().environment.settings.escape_html
        return bool(escape_html)

    def set_escape_html(self, escape_html: bool) -> "MustachePanel":
        """HTML 이스케이프 여부 설정 (체이닝)"""
        self._escape_html.set_object(escape_html)
        return self

    def new_template_resource(self) -> Optional[ITemplateResource]:
        """템플릿 리소스 (서브클래스에서 재정의 가능)"""
        return self.template_resource

    def _require_template_resource(self) -> ITemplateResource:
        resource = self.new_template_resource()
        if resource is None:
            raise ValueError("new_template_resource must return a resource")
        return resource

    @property
    def render_cache(self) -> RenderCache:
        if self._render_cache is None:
            self._render_cache = RenderCache(
                self.get_page().environment,
                self._require_template_resource,
                self.id,
                guard=lambda: self.size() > 0
            )
        return self._render_cache

    def render_body(self) -> str:
        return self.render_cache.render(self.get_default_model_object(), self.is_escape_html())

    def on_detach(self) -> None:
        if self._render_cache is not None:
            self._render_cache.clear()
        self._escape_html.detach()


def new_mustache_template_panel(
    component_id: str,
    model: Any,
    template_resource: ITemplateResource,
    escape_html: Optional[bool] = None
) -> MustachePanel:
    """
    MustachePanel 생성

    Args:
        component_id: 컴포넌트 ID (템플릿 식별자로도 사용)
        model: 스코프 또는 스코프 모델
        template_resource: 템플릿 리소스
        escape_html: HTML 이스케이프 여부 (None이면 설정 escape_html)

    Returns:
        MustachePanel 객체
    """
    return MustachePanel(component_id, model, template_resource, escape_html)


class ClientSideMustachePanel(Component):
    """
    클라이언트 측 mustache 패널

    원시 템플릿을 data-template 속성에 싣고, DOM 준비 시 mustache.js로
    JSON 직렬화된 모델 객체를 렌더링하는 스크립트를 head에 추가합니다.
    """

    def __init__(
        self,
        component_id: str,
        model: Any = None,
        template_resource: Optional[ITemplateResource] = None
    ):
        super().__init__(component_id, model)
        self.template_resource = template_resource
        self.set_output_markup_id(True)
        self.add_behavior(
            AttributeModifier(DATA_TEMPLATE_ATTRIBUTE, LoadableDetachableModel(self.new_template))
        )

    def new_template_resource(self) -> Optional[ITemplateResource]:
        """템플릿 리소스 (서브클래스에서 재정의 가능)"""
        return self.template_resource

    def new_template(self) -> str:
        """
        원시 템플릿 텍스트 로드

        Raises:
            ValueError: new_template_resource가 None을 반환한 경우
            TemplateError: 템플릿 내용을 읽을 수 없는 경우
        """
        resource = self.new_template_resource()
        if resource is None:
            raise ValueError("new_template_resource must return a resource")
        return self.get_page().environment.load_source(resource, self.id)

    def render_head(self, response: HeaderResponse) -> None:
        if self.size() > 0:
            raise handle_error(ErrorCode.STRUCTURAL_CONFLICT, component_id=self.id)

        super().render_head(response)

        settings = self.get_page().environment.settings
        response.render(JavaScriptReferenceHeaderItem(settings.jquery_url))
        response.render(MustacheJsReference.from_settings(settings).header_item())
        self.append_render_script(response)

    def append_render_script(self, response: HeaderResponse) -> None:
        response.render(OnDomReadyHeaderItem(self.create_script()))

    def create_template_data_json(self) -> str:
        """모델 객체를 JSON 텍스트로 직렬화"""
        return self.get_page().environment.json_mapper.stringify(self.get_default_model_object())

    def create_script(self) -> str:
        """패널 본문을 렌더링하는 스크립트"""
        return create_render_script(self.get_markup_id(), self.create_template_data_json())

    def new_markup(self) -> str:
        """본문 마크업 (기본: 빈 문자열)"""
        return ""

    def render_body(self) -> str:
        return self.new_markup()


class LazyLoadingClientSideMustachePanel(ClientSideMustachePanel):
    """
    지연 로딩 클라이언트 측 mustache 패널

    본문에는 로딩 메시지를 출력하고, delay() 밀리초 후 AJAX 콜백이
    렌더링 스크립트를 반환합니다.
    """

    def __init__(
        self,
        component_id: str,
        model: Any = None,
        template_resource: Optional[ITemplateResource] = None
    ):
        super().__init__(component_id, model, template_resource)
        self._callback_token: Optional[str] = None

    def delay(self) -> int:
        """지연 시간 (밀리초, 기본: 설정값)"""
        return self.get_page().environment.settings.lazy_load_delay_ms

    def loading(self) -> str:
        """로딩 메시지 (기본: 설정값 "loading...")"""
        return self.get_page().environment.settings.loading_message

    def callback_url(self) -> str:
        """AJAX 콜백 URL (처음 요청 시 콜백 등록)"""
        environment = self.get_page().environment
        if self._callback_token is None or self._callback_token not in environment.callbacks:
            self._callback_token = environment.callbacks.register(self.respond)
        return environment.callbacks.url_for(self._callback_token, environment.settings.callback_path)

    def respond(self) -> str:
        """콜백 응답: 렌더링 스크립트 (응답 후 모델 detach)"""
        try:
            script = self.create_script()
            logger.debug("Lazy panel responded", component_id=self.id)
            return script
        finally:
            self.detach()

    def append_render_script(self, response: HeaderResponse) -> None:
        response.render(OnDomReadyHeaderItem(create_lazy_load_script(self.callback_url(), self.delay())))

    def new_markup(self) -> str:
        return str(self.loading())
