"""
pystache 엔진 단위 테스트

테스트 범위:
- 변수 치환 / 섹션 / 반전 섹션 / 부분 템플릿
- 스코프 래퍼 해석 (ScopedMap, ScopedList, ScopedObject)
- 엔진 측 이스케이프 비활성화
- 에러 처리
"""

import pytest

from mustache_web.domain.errors import TemplateError
from mustache_web.domain.models.scope import ScopedList, ScopedMap, ScopedObject
from mustache_web.infrastructure.template import PystacheTemplateEngine


class Product:
    def __init__(self, name, features):
        self.name = name
        self.features = features

    def title(self):
        return self.name.upper()


@pytest.fixture
def engine() -> PystacheTemplateEngine:
    return PystacheTemplateEngine()


@pytest.mark.unit
class TestPystacheTemplateEngine:
    """PystacheTemplateEngine 테스트"""

    def test_simple_variable(self, engine):
        """간단한 변수 치환"""
        assert engine.compile("Hello {{name}}!", "greeting", {"name": "World"}) == "Hello World!"

    def test_no_engine_side_escaping(self, engine):
        """엔진은 HTML을 이스케이프하지 않음"""
        assert engine.compile("Hello {{name}}!", "greeting", {"name": "<b>"}) == "Hello <b>!"

    def test_missing_variable_ignored(self, engine):
        """누락된 변수는 빈 문자열 (ignore 모드)"""
        assert engine.compile("[{{missing}}]", "t", {}) == "[]"

    def test_missing_variable_strict(self):
        """strict 모드에서는 TemplateError"""
        engine = PystacheTemplateEngine(missing_tags="strict")

        with pytest.raises(TemplateError) as exc_info:
            engine.compile("{{missing}}", "strict-template", {})

        assert exc_info.value.template_id == "strict-template"

    def test_scope_none(self, engine):
        """스코프 없이 컴파일"""
        assert engine.compile("static {{! comment }}text", "t") == "static text"

    def test_scoped_map_section(self, engine):
        """ScopedMap 안의 리스트 섹션"""
        scope = ScopedMap({"items": [{"name": "a"}, {"name": "b"}]})

        assert engine.compile("{{#items}}<{{name}}>{{/items}}", "t", scope) == "<a><b>"

    def test_scoped_list_of_scoped_maps(self, engine):
        """중첩된 스코프 래퍼 해석"""
        scope = ScopedMap({"items": ScopedList([ScopedMap({"name": "x"}), ScopedMap({"name": "y"})])})

        assert engine.compile("{{#items}}{{name}},{{/items}}", "t", scope) == "x,y,"

    def test_implicit_iterator(self, engine):
        """{{.}} 현재 항목"""
        scope = {"features": ["New!", "Awesome!"]}

        assert engine.compile("{{#features}}[{{.}}]{{/features}}", "t", scope) == "[New!][Awesome!]"

    def test_inverted_section_on_empty(self, engine):
        """빈 리스트/빈 맵은 반전 섹션 렌더링"""
        assert engine.compile("{{^items}}none{{/items}}", "t", {"items": []}) == "none"
        assert engine.compile("{{^data}}none{{/data}}", "t", {"data": ScopedMap()}) == "none"
        assert engine.compile("{{^items}}none{{/items}}", "t", {"items": ScopedList()}) == "none"

    def test_arbitrary_object(self, engine):
        """임의 객체의 속성과 인자 없는 메서드"""
        product = Product("widget", ["small"])

        output = engine.compile("{{title}}:{{#features}}{{.}}{{/features}}", "t", product)

        assert output == "WIDGET:small"

    def test_scoped_object_and_dotted_names(self, engine):
        """ScopedObject와 점 표기법"""
        scope = {"product": ScopedObject(Product("widget", []))}

        assert engine.compile("{{product.name}}", "t", scope) == "widget"

    def test_object_section_pushes_context(self, engine):
        """객체 섹션은 객체를 컨텍스트로 사용"""
        scope = {"product": Product("widget", [])}

        assert engine.compile("{{#product}}{{name}}{{/product}}", "t", scope) == "widget"

    def test_lambda_section(self, engine):
        """매핑 값으로 전달된 람다는 섹션 텍스트를 받음"""
        scope = {"bold": lambda text: f"<b>{text}</b>"}

        assert engine.compile("{{#bold}}hi{{/bold}}", "t", scope) == "<b>hi</b>"

    def test_partials_lookup(self, engine):
        """부분 템플릿 조회 함수 사용"""
        partials = {"item": "<li>{{name}}</li>"}

        output = engine.compile(
            "<ul>{{#items}}{{> item}}{{/items}}</ul>",
            "list",
            {"items": [{"name": "a"}]},
            partials=partials.get
        )

        assert output == "<ul><li>a</li></ul>"

    def test_missing_partial_ignored(self, engine):
        """없는 부분 템플릿은 빈 문자열 (ignore 모드)"""
        assert engine.compile("[{{> nothing}}]", "t", {}, partials=lambda name: None) == "[]"

    def test_malformed_template_raises(self, engine):
        """잘못된 템플릿은 TemplateError (식별자 포함)"""
        with pytest.raises(TemplateError) as exc_info:
            engine.compile("{{#items}}x{{/other}}", "broken", {"items": [1]})

        assert exc_info.value.template_id == "broken"
        assert exc_info.value.original_error is not None

    def test_scope_not_copied(self, engine):
        """스코프는 복사되지 않음 (컴파일 시점의 값 사용)"""
        data = {"name": "before"}
        scope = ScopedMap(data)
        data["name"] = "after"

        assert engine.compile("{{name}}", "t", scope) == "after"
