"""
호스트 컴포넌트 모델 단위 테스트

mustache_web/presentation/components/base.py 테스트
"""

import pytest
from unittest.mock import MagicMock

from mustache_web.domain.errors import ErrorCode, StructuralConflictError
from mustache_web.presentation.components import (
    AttributeModifier,
    Behavior,
    Component,
    HeaderResponse,
    JavaScriptReferenceHeaderItem,
    LoadableDetachableModel,
    Model,
    OnDomReadyHeaderItem,
    Page,
    StringHeaderItem,
    wrap_model,
)


@pytest.mark.unit
class TestModels:
    """Model / LoadableDetachableModel 테스트"""

    def test_loaded_once_per_cycle(self):
        """사이클당 한 번 로드, detach 후 다시 로드"""
        loader = MagicMock(side_effect=[{"n": 1}, {"n": 2}])
        model = LoadableDetachableModel(loader)

        assert model.get_object() == {"n": 1}
        assert model.get_object() == {"n": 1}
        assert model.is_attached

        model.detach()

        assert not model.is_attached
        assert model.get_object() == {"n": 2}
        assert loader.call_count == 2

    def test_load_override(self):
        class Counter(LoadableDetachableModel):
            def load(self):
                return 42

        assert Counter().get_object() == 42

    def test_wrap_model(self):
        model = Model("x")

        assert wrap_model(model) is model
        assert wrap_model("y").get_object() == "y"


@pytest.mark.unit
class TestHeaderResponse:
    """HeaderResponse 테스트"""

    def test_items_rendered_once_in_order(self):
        """같은 항목은 한 번만, 추가 순서대로"""
        response = HeaderResponse()
        response.render(JavaScriptReferenceHeaderItem("/jquery.js"))
        response.render(StringHeaderItem("<style></style>"))
        response.render(JavaScriptReferenceHeaderItem("/jquery.js"))

        assert response.get_markup() == (
            '<script type="text/javascript" src="/jquery.js"></script>\n<style></style>'
        )

    def test_on_dom_ready_item(self):
        markup = OnDomReadyHeaderItem("init()").render()

        assert "$(function(){init();});" in markup
        assert markup.startswith('<script type="text/javascript">')
        assert markup.endswith("</script>")


@pytest.mark.unit
class TestComponent:
    """Component 테스트"""

    def test_add_and_size(self):
        parent = Component("parent")

        assert parent.add(Component("a"), Component("b")) is parent
        assert parent.size() == 2
        assert parent.children[0].parent is parent

    def test_markup_id_allocation(self, environment):
        """정제된 ID + 페이지 순번, 한 번 할당되면 유지"""
        page = Page(environment)
        first = Component("template-client")
        second = Component("1 bad.id")
        page.add(first, second)

        assert first.get_markup_id() == "template-client1"
        assert second.get_markup_id() == "id1badid2"
        assert first.get_markup_id() == "template-client1"

    def test_not_attached(self):
        """페이지에 없는 컴포넌트"""
        with pytest.raises(StructuralConflictError) as exc_info:
            Component("orphan").get_markup_id()

        assert exc_info.value.error_code == ErrorCode.COMPONENT_NOT_ATTACHED

    def test_render_with_attributes(self, environment):
        """속성 값은 이스케이프"""
        page = Page(environment)
        component = Component("box").set_output_markup_id(True)
        component.add_behavior(AttributeModifier("title", 'say "hi" <now>'))
        page.add(component)

        assert component.render() == '<div id="box1" title="say &quot;hi&quot; &lt;now&gt;"></div>'

    def test_attribute_modifier_none_removes(self, environment):
        page = Page(environment)
        component = Component("box")
        component.add_behavior(AttributeModifier("class", "a"), AttributeModifier("class", None))
        page.add(component)

        assert component.render() == "<div></div>"

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            Component("")


@pytest.mark.unit
class TestPage:
    """Page 테스트"""

    def test_render_shell(self, environment):
        """제목, head, body를 페이지 셸에 출력"""
        class HeadBehavior(Behavior):
            def render_head(self, component, response):
                response.render(StringHeaderItem("<style>p{}</style>"))

        page = Page(environment, title="Demo & Co")
        page.add_behavior(HeadBehavior())
        page.add(Component("child"))

        html = page.render()

        assert "<title>Demo &amp; Co</title>" in html
        assert "<style>p{}</style>" in html
        assert "<div></div>" in html
        assert html.lstrip().startswith("<!DOCTYPE html>")

    def test_render_detaches_tree(self, environment):
        """렌더링 후 트리 detach"""
        model = LoadableDetachableModel(lambda: "value")
        child = Component("child", model)
        child.render_body = lambda: str(child.get_default_model_object())
        page = Page(environment)
        page.add(child)

        assert "<div>value</div>" in page.render()
        assert not model.is_attached

    def test_render_detaches_on_error(self, environment):
        """에러가 나도 detach"""
        class Failing(Component):
            def render_body(self):
                self.get_default_model_object()
                raise RuntimeError("boom")

        model = LoadableDetachableModel(lambda: "value")
        page = Page(environment)
        page.add(Failing("failing", model))

        with pytest.raises(RuntimeError):
            page.render()

        assert not model.is_attached
