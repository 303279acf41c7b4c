"""
mustache 동작(behavior)

MustacheTemplate: 템플릿을 컴파일하여 head에 문자열 항목으로 추가
MustacheTemplateAppender: 원시 템플릿을 data-template 속성으로 추가
"""

from typing import Any, Dict, Optional

from mustache_web.application.ports.template_port import ITemplateResource
from mustache_web.domain.errors import ErrorCode, MustacheWebError, handle_error
from mustache_web.domain.models.template import DATA_TEMPLATE_ATTRIBUTE, resolve_template_name
from mustache_web.infrastructure.template import PackageResource
from .base import Behavior, Component, HeaderResponse, StringHeaderItem, wrap_model


def new_template_resource(template_name: str, component: Component) -> ITemplateResource:
    """컴포넌트 클래스 기준 패키지 리소스"""
    settings = component.get_page().environment.settings
    return PackageResource(
        type(component), template_name, settings.file_encoding, settings.template_extension
    )


def new_template_name(template_name: Optional[str], component: Component) -> str:
    """템플릿 이름 결정 (기본: "<컴포넌트 클래스명><설정 확장자>")"""
    extension = component.get_page().environment.settings.template_extension
    return resolve_template_name(template_name, component, extension)


class MustacheTemplate(Behavior):
    """
    템플릿을 컴파일하여 페이지 head에 기록하는 동작

    템플릿 이름이 없으면 "<컴포넌트 클래스명>.mustache"를 사용합니다
    (확장자는 설정 template_extension).

    Example:
        >>> page.add_behavior(MustacheTemplate({"color": "red"}, "styles.mustache"))
    """

    def __init__(self, template_data: Any, template_name: Optional[str] = None):
        if template_data is None:
            raise ValueError("template_data는 None일 수 없습니다")

        self.template_data = wrap_model(template_data)
        self.template_name = wrap_model(template_name)

    def render_head(self, component: Component, response: HeaderResponse) -> None:
        content = self.compile(component)
        if content is not None:
            response.render(StringHeaderItem(content))

    def escape_html(self) -> bool:
        """HTML 이스케이프 여부 (기본: False)"""
        return False

    def new_template_resource(self, template_name: str, component: Component) -> ITemplateResource:
        return new_template_resource(template_name, component)

    def compile(self, component: Component) -> str:
        """
        템플릿 컴파일

        Raises:
            TemplateError: 템플릿 로드/컴파일 실패 시 (템플릿 이름 포함)
        """
        name = new_template_name(self.template_name.get_object(), component)
        self.template_name.set_object(name)

        try:
            return component.get_page().environment.compile(
                self.new_template_resource(name, component),
                name,
                data=self.template_data.get_object(),
                escape_html=self.escape_html()
            )
        except MustacheWebError:
            raise
        except Exception as e:
            raise handle_error(ErrorCode.TEMPLATE_EXECUTION_FAILED, original_error=e, template_id=name)

    def detach(self, component: Component) -> None:
        self.template_name.detach()
        self.template_data.detach()


class MustacheTemplateAppender(Behavior):
    """원시 템플릿 텍스트를 컴포넌트 태그의 data-template 속성으로 추가하는 동작"""

    def __init__(self, template_name: Optional[str] = None):
        self.template_name = wrap_model(template_name)

    def on_component_tag(self, component: Component, attributes: Dict[str, Any]) -> None:
        attributes[DATA_TEMPLATE_ATTRIBUTE] = self.load_template(component)

    def load_template(self, component: Component) -> str:
        name = new_template_name(self.template_name.get_object(), component)
        self.template_name.set_object(name)
        return component.get_page().environment.load_source(new_template_resource(name, component), name)

    def detach(self, component: Component) -> None:
        self.template_name.detach()
