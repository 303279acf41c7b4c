"""
mustache 동작 단위 테스트

mustache_web/presentation/components/behaviors.py 테스트
"""

import pytest

from mustache_web.application.environment import MustacheEnvironment
from mustache_web.domain.errors import TemplateError
from mustache_web.infrastructure.config import MustacheSettings
from mustache_web.presentation.components import (
    Component,
    MustacheTemplate,
    MustacheTemplateAppender,
    Page,
)


class Widget(Component):
    """이 모듈 옆의 Widget.mustache를 기본 템플릿으로 사용"""


def render_widget(environment, *behaviors) -> str:
    page = Page(environment)
    page.add(Widget("widget").add_behavior(*behaviors))
    return page.render()


@pytest.mark.unit
class TestMustacheTemplate:
    """MustacheTemplate 테스트"""

    def test_default_template_name(self, environment):
        """이름이 없으면 "<컴포넌트 클래스명>.mustache"를 head에 출력"""
        behavior = MustacheTemplate({"color": "red"})

        html = render_widget(environment, behavior)

        assert "<style>.widget { color: red; }</style>" in html
        assert behavior.template_name.get_object() == "Widget.mustache"

    def test_explicit_template_name(self, environment):
        html = render_widget(environment, MustacheTemplate({"name": "World"}, "greeting.mustache"))

        assert "Hello World!" in html

    def test_escape_html_override(self, environment):
        """escape_html() 재정의"""
        class EscapedTemplate(MustacheTemplate):
            def escape_html(self):
                return True

        html = render_widget(environment, EscapedTemplate({"color": "red"}))

        assert "&lt;style&gt;.widget { color: red; }&lt;/style&gt;" in html

    def test_missing_template(self, environment):
        """없는 템플릿은 이름을 포함한 TemplateError"""
        with pytest.raises(TemplateError) as exc_info:
            render_widget(environment, MustacheTemplate({}, "nope.mustache"))

        assert exc_info.value.template_id == "nope.mustache"

    def test_default_name_uses_configured_extension(self):
        """기본 이름의 확장자는 설정 template_extension"""
        environment = MustacheEnvironment(MustacheSettings(template_extension=".mst"))
        behavior = MustacheTemplate({"color": "red"})

        html = render_widget(environment, behavior)

        assert "<em>red</em>" in html
        assert behavior.template_name.get_object() == "Widget.mst"

    def test_template_data_required(self):
        with pytest.raises(ValueError):
            MustacheTemplate(None)


@pytest.mark.unit
class TestMustacheTemplateAppender:
    """MustacheTemplateAppender 테스트"""

    def test_raw_template_attribute(self, environment):
        """원시 템플릿을 data-template 속성으로 출력"""
        html = render_widget(environment, MustacheTemplateAppender())

        assert (
            '<div data-template="&lt;style&gt;.widget { color: {{color}}; }&lt;/style&gt;"></div>'
            in html
        )

    def test_explicit_name(self, environment):
        html = render_widget(environment, MustacheTemplateAppender("greeting.mustache"))

        assert '<div data-template="Hello {{name}}!"></div>' in html
