"""
mustache 패널 단위 테스트

테스트 범위:
- MustachePanel 서버 측 렌더링, 이스케이프, 사이클당 한 번 컴파일
- 자식 컴포넌트 추가 시 구조 충돌
- ClientSideMustachePanel data-template / head 스크립트
- LazyLoadingClientSideMustachePanel 콜백
"""

import pytest
from unittest.mock import patch

from mustache_web.application.environment import MustacheEnvironment
from mustache_web.domain.errors import StructuralConflictError, TemplateError
from mustache_web.domain.models.scope import new_scoped_map
from mustache_web.infrastructure.config import MustacheSettings
from mustache_web.infrastructure.template import StringResource
from mustache_web.presentation.components import (
    ClientSideMustachePanel,
    Component,
    LazyLoadingClientSideMustachePanel,
    LoadableDetachableModel,
    MustachePanel,
    Page,
    new_mustache_template_panel,
)

GREETING = "Hello {{name}}!"


@pytest.mark.unit
class TestMustachePanel:
    """MustachePanel 테스트"""

    def test_server_side_render(self, environment):
        """컴파일 결과를 본문으로 출력"""
        page = Page(environment)
        page.add(new_mustache_template_panel("greeting", {"name": "World"}, StringResource(GREETING)))

        assert "<div>Hello World!</div>" in page.render()

    def test_escape_html(self, environment):
        """escape 플래그가 켜지면 출력 전체 이스케이프"""
        panel = MustachePanel("greeting", {"name": "<b>"}, StringResource(GREETING))
        page = Page(environment)
        page.add(panel)

        assert panel.set_escape_html(True) is panel
        assert panel.is_escape_html()
        assert "<div>Hello &lt;b&gt;!</div>" in page.render()

    def test_escape_html_default_from_settings(self):
        """플래그를 지정하지 않으면 설정 escape_html을 따름"""
        environment = MustacheEnvironment(MustacheSettings(escape_html=True))
        page = Page(environment)
        page.add(MustachePanel("greeting", {"name": "<b>"}, StringResource(GREETING)))

        assert "<div>Hello &lt;b&gt;!</div>" in page.render()

    def test_explicit_flag_overrides_settings(self):
        environment = MustacheEnvironment(MustacheSettings(escape_html=True))
        page = Page(environment)
        page.add(MustachePanel("greeting", {"name": "<b>"}, StringResource(GREETING), escape_html=False))

        assert "<div>Hello <b>!</div>" in page.render()

    def test_compiled_once_per_cycle(self, environment):
        """같은 사이클에서는 스코프가 바뀌어도 같은 출력"""
        scope = new_scoped_map({"name": "World"})
        panel = MustachePanel("greeting", scope, StringResource(GREETING))
        Page(environment).add(panel)

        first = panel.render_body()
        scope["name"] = "Changed"

        assert panel.render_body() == first

        panel.detach()

        assert not panel.render_cache.is_cached
        assert panel.render_body() == "Hello Changed!"

    def test_recompiled_each_page_render(self, environment):
        """페이지 렌더링마다 다시 컴파일"""
        panel = MustachePanel("greeting", {"name": "World"}, StringResource(GREETING))
        page = Page(environment)
        page.add(panel)

        with patch.object(environment, "compile", wraps=environment.compile) as compile_spy:
            page.render()
            page.render()

        assert compile_spy.call_count == 2
        assert not panel.render_cache.is_cached

    def test_children_conflict_before_compile(self, environment):
        """자식 컴포넌트가 있으면 컴파일 전에 StructuralConflictError"""
        panel = MustachePanel("greeting", {"name": "World"}, StringResource(GREETING))
        panel.add(Component("child"))
        page = Page(environment)
        page.add(panel)

        with patch.object(environment, "compile", wraps=environment.compile) as compile_spy:
            with pytest.raises(StructuralConflictError):
                page.render()

        compile_spy.assert_not_called()

    def test_new_template_resource_override(self, environment):
        """리소스를 서브클래스에서 제공"""
        class GreetingPanel(MustachePanel):
            def new_template_resource(self):
                return StringResource("Hi {{name}}")

        page = Page(environment)
        page.add(GreetingPanel("greeting", {"name": "there"}))

        assert "<div>Hi there</div>" in page.render()

    def test_missing_resource(self, environment):
        """리소스가 없으면 ValueError"""
        page = Page(environment)
        page.add(MustachePanel("greeting", {}))

        with pytest.raises(ValueError, match="must return a resource"):
            page.render()

    def test_template_error_propagates(self, environment):
        """컴파일 실패는 패널 ID를 식별자로 가진 TemplateError"""
        page = Page(environment)
        page.add(MustachePanel("broken", {}, StringResource("{{#a}}{{/b}}")))

        with pytest.raises(TemplateError) as exc_info:
            page.render()

        assert exc_info.value.template_id == "broken"


@pytest.mark.unit
class TestClientSideMustachePanel:
    """ClientSideMustachePanel 테스트"""

    def test_markup_and_head(self, environment):
        """data-template 속성, 빈 본문, head 스크립트"""
        page = Page(environment)
        page.add(ClientSideMustachePanel("greeting", {"name": "World"}, StringResource(GREETING)))

        html = page.render()

        assert '<div id="greeting1" data-template="Hello {{name}}!"></div>' in html
        assert environment.settings.jquery_url in html
        assert environment.mustache_js_url() in html
        assert (
            '$("#greeting1").html(Mustache.render($("#greeting1").attr(\'data-template\'), {"name":"World"}))'
            in html
        )

    def test_template_loaded_once_per_cycle(self, environment):
        """원시 템플릿은 사이클당 한 번 로드"""
        panel = ClientSideMustachePanel("greeting", {"name": "World"}, StringResource(GREETING))
        page = Page(environment)
        page.add(panel)

        with patch.object(panel, "new_template_resource", wraps=panel.new_template_resource) as spy:
            page.render()

        assert spy.call_count == 1

    def test_children_conflict(self, environment):
        """자식 컴포넌트가 있으면 StructuralConflictError"""
        panel = ClientSideMustachePanel("greeting", {}, StringResource(GREETING))
        panel.add(Component("child"))
        page = Page(environment)
        page.add(panel)

        with pytest.raises(StructuralConflictError):
            page.render()

    def test_script_payload_cannot_close_script_block(self, environment):
        """JSON 페이로드의 </script>는 이스케이프"""
        page = Page(environment)
        page.add(ClientSideMustachePanel("greeting", {"name": "</script><b>"}, StringResource(GREETING)))

        html = page.render()

        assert '{"name":"<\\/script><b>"}' in html
        assert '"</script><b>"' not in html

    def test_none_model(self, environment):
        """모델이 없으면 빈 객체"""
        page = Page(environment)
        page.add(ClientSideMustachePanel("greeting", None, StringResource(GREETING)))

        assert "attr('data-template'), {}))" in page.render()


@pytest.mark.unit
class TestLazyLoadingClientSideMustachePanel:
    """LazyLoadingClientSideMustachePanel 테스트"""

    def test_loading_markup_and_callback(self, environment):
        """본문은 로딩 메시지, head는 지연 콜백 스크립트"""
        model = LoadableDetachableModel(lambda: {"name": "World"})
        panel = LazyLoadingClientSideMustachePanel("lazy", model, StringResource(GREETING))
        page = Page(environment)
        page.add(panel)

        html = page.render()

        assert ">loading...</div>" in html
        assert "setTimeout(function(){$.getScript(\"/_mustache/callback/" in html
        assert "}, 0);" in html
        assert "Mustache.render(" not in html

        token = panel.callback_url().rsplit("/", 1)[1]
        script = environment.callbacks.invoke(token)

        assert script == (
            '$("#lazy1").html(Mustache.render($("#lazy1").attr(\'data-template\'), {"name":"World"}))'
        )
        assert not model.is_attached

    def test_callback_registered_once(self, environment):
        """여러 번 렌더링해도 콜백은 하나"""
        panel = LazyLoadingClientSideMustachePanel("lazy", {}, StringResource(GREETING))
        page = Page(environment)
        page.add(panel)

        page.render()
        page.render()

        assert len(environment.callbacks) == 1

    def test_custom_delay_and_loading(self, environment):
        """delay() / loading() 재정의"""
        class SlowPanel(LazyLoadingClientSideMustachePanel):
            def delay(self):
                return 500

            def loading(self):
                return "잠시만요"

        page = Page(environment)
        page.add(SlowPanel("slow", {}, StringResource(GREETING)))

        html = page.render()

        assert "}, 500);" in html
        assert ">잠시만요</div>" in html
