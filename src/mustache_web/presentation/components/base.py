"""
호스트 컴포넌트 모델

mustache 패널과 동작(behavior)을 호스팅하기 위한 최소한의 컴포넌트 트리입니다.

Model / LoadableDetachableModel: 컴포넌트 데이터 모델
Behavior / AttributeModifier: 컴포넌트에 부착되는 동작
HeaderResponse: 페이지 head 항목 수집
Component / Page: 컴포넌트 트리와 렌더 사이클
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from mustache_web.domain.errors import ErrorCode, handle_error
from mustache_web.infrastructure.logging import get_logger
from mustache_web.infrastructure.template import escape_markup
from .scripts import on_dom_ready

if TYPE_CHECKING:
    from mustache_web.application.environment import MustacheEnvironment

logger = get_logger(__name__, component="Page")

_MARKUP_ID_INVALID = re.compile(r"[^A-Za-z0-9_-]")


# ============================================================================
# Models
# ============================================================================


class Model:
    """값을 그대로 보관하는 모델"""

    def __init__(self, value: Any = None):
        self._value = value

    def get_object(self) -> Any:
        return self._value

    def set_object(self, value: Any) -> None:
        self._value = value

    def detach(self) -> None:
        pass


class LoadableDetachableModel(Model):
    """
    렌더 사이클마다 한 번 로드되고 detach 시 버려지는 모델

    Example:
        >>> model = LoadableDetachableModel(lambda: {"name": "World"})
        >>> model.get_object()
        {'name': 'World'}
    """

    def __init__(self, loader: Optional[Callable[[], Any]] = None):
        super().__init__()
        self._loader = loader
        self._attached = False

    @property
    def is_attached(self) -> bool:
        """현재 사이클에서 로드되었는지 여부"""
        return self._attached

    def load(self) -> Any:
        """값 로드 (서브클래스에서 재정의 가능)"""
        if self._loader is None:
            return None
        return self._loader()

    def get_object(self) -> Any:
        if not self._attached:
            self._value = self.load()
            self._attached = True
        return self._value

    def set_object(self, value: Any) -> None:
        self._value = value
        self._attached = True

    def detach(self) -> None:
        self._attached = False
        self._value = None


def wrap_model(value: Any) -> Model:
    """Model이 아닌 값을 Model로 감싸기"""
    if isinstance(value, Model):
        return value
    return Model(value)


# ============================================================================
# Header items
# ============================================================================


class HeaderItem:
    """페이지 head에 들어가는 항목"""

    def key(self) -> Any:
        """중복 제거 키"""
        return (type(self).__name__, self.render())

    def render(self) -> str:
        raise NotImplementedError


class JavaScriptReferenceHeaderItem(HeaderItem):
    """외부 스크립트 참조 (<script src=...>)"""

    def __init__(self, url: str):
        self.url = url

    def render(self) -> str:
        return f'<script type="text/javascript" src="{escape_markup(self.url)}"></script>'


class OnDomReadyHeaderItem(HeaderItem):
    """DOM 준비 후 실행되는 인라인 스크립트"""

    def __init__(self, script: str):
        self.script = script

    def render(self) -> str:
        return (
            '<script type="text/javascript">\n'
            "/*<![CDATA[*/\n"
            f"{on_dom_ready(self.script)}\n"
            "/*]]>*/\n"
            "</script>"
        )


class StringHeaderItem(HeaderItem):
    """문자열을 그대로 출력하는 항목"""

    def __init__(self, content: str):
        self.content = content

    def render(self) -> str:
        return str(self.content)


class HeaderResponse:
    """
    head 항목 수집기

    같은 항목은 한 번만, 추가된 순서대로 출력합니다.
    """

    def __init__(self):
        self._items: List[HeaderItem] = []
        self._keys = set()

    def render(self, item: HeaderItem) -> None:
        key = item.key()
        if key in self._keys:
            return
        self._keys.add(key)
        self._items.append(item)

    @property
    def items(self) -> List[HeaderItem]:
        return list(self._items)

    def get_markup(self) -> str:
        return "\n".join(item.render() for item in self._items)


# ============================================================================
# Behaviors
# ============================================================================


class Behavior:
    """컴포넌트에 부착되는 동작 (기본 구현은 아무것도 하지 않음)"""

    def bind(self, component: "Component") -> None:
        pass

    def on_component_tag(self, component: "Component", attributes: Dict[str, Any]) -> None:
        pass

    def render_head(self, component: "Component", response: HeaderResponse) -> None:
        pass

    def detach(self, component: "Component") -> None:
        pass


class AttributeModifier(Behavior):
    """
    컴포넌트 태그 속성 설정

    Args:
        name: 속성 이름
        value: 속성 값 또는 Model (None이면 속성 제거)
    """

    def __init__(self, name: str, value: Any):
        self.name = name
        self.model = wrap_model(value)

    def on_component_tag(self, component: "Component", attributes: Dict[str, Any]) -> None:
        value = self.model.get_object()
        if value is None:
            attributes.pop(self.name, None)
        else:
            attributes[self.name] = value

    def detach(self, component: "Component") -> None:
        self.model.detach()


# ============================================================================
# Components
# ============================================================================


class Component:
    """
    컴포넌트 트리 노드

    Attributes:
        id: 컴포넌트 ID
        model: 데이터 모델
        parent: 부모 컴포넌트
        tag_name: 렌더링할 태그 이름
    """

    tag_name = "div"

    def __init__(self, component_id: str, model: Any = None):
        if not component_id:
            raise ValueError("component_id는 비어 있을 수 없습니다")

        self.id = component_id
        self.model: Optional[Model] = wrap_model(model) if model is not None else None
        self.parent: Optional["Component"] = None
        self._children: List["Component"] = []
        self._behaviors: List[Behavior] = []
        self._output_markup_id = False
        self._markup_id: Optional[str] = None

    # 트리 구성
    def add(self, *children: "Component") -> "Component":
        """자식 컴포넌트 추가 (체이닝)"""
        for child in children:
            child.parent = self
            self._children.append(child)
        return self

    def size(self) -> int:
        """자식 컴포넌트 수"""
        return len(self._children)

    @property
    def children(self) -> List["Component"]:
        return list(self._children)

    def add_behavior(self, *behaviors: Behavior) -> "Component":
        """동작 부착 (체이닝)"""
        for behavior in behaviors:
            behavior.bind(self)
            self._behaviors.append(behavior)
        return self

    @property
    def behaviors(self) -> List[Behavior]:
        return list(self._behaviors)

    def get_page(self) -> "Page":
        """
        컴포넌트가 속한 페이지

        Raises:
            StructuralConflictError: 페이지에 추가되지 않은 경우
        """
        node: Optional[Component] = self
        while node is not None:
            if isinstance(node, Page):
                return node
            node = node.parent
        raise handle_error(ErrorCode.COMPONENT_NOT_ATTACHED, component_id=self.id)

    # 모델
    def get_default_model_object(self) -> Any:
        return self.model.get_object() if self.model is not None else None

    # 마크업 ID
    def set_output_markup_id(self, output: bool) -> "Component":
        self._output_markup_id = output
        return self

    def get_markup_id(self) -> str:
        """페이지 내에서 유일한 마크업 ID (처음 요청 시 할당)"""
        if self._markup_id is None:
            base = _MARKUP_ID_INVALID.sub("", self.id) or "id"
            if not base[0].isalpha():
                base = f"id{base}"
            self._markup_id = f"{base}{self.get_page().next_sequence()}"
        return self._markup_id

    # 렌더링
    def render_head(self, response: HeaderResponse) -> None:
        """동작과 자식의 head 항목 수집"""
        for behavior in self._behaviors:
            behavior.render_head(self, response)
        for child in self._children:
            child.render_head(response)

    def on_component_tag(self, attributes: Dict[str, Any]) -> None:
        pass

    def render_body(self) -> str:
        return "".join(child.render() for child in self._children)

    def render(self) -> str:
        """태그 + 속성 + 본문 렌더링"""
        attributes: Dict[str, Any] = {}
        if self._output_markup_id:
            attributes["id"] = self.get_markup_id()

        self.on_component_tag(attributes)
        for behavior in self._behaviors:
            behavior.on_component_tag(self, attributes)

        rendered_attributes = "".join(
            f' {name}="{escape_markup(value)}"' for name, value in attributes.items()
        )
        return f"<{self.tag_name}{rendered_attributes}>{self.render_body()}</{self.tag_name}>"

    # 사이클 종료
    def detach(self) -> None:
        """렌더 사이클 종료 (자식, 동작, 모델 순서)"""
        for child in self._children:
            child.detach()
        for behavior in self._behaviors:
            behavior.detach(self)
        if self.model is not None:
            self.model.detach()
        self.on_detach()

    def on_detach(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


_shell_env = Environment(
    loader=PackageLoader("mustache_web.presentation.components", "templates"),
    autoescape=select_autoescape(["html"]),
)


class Page(Component):
    """
    최상위 페이지

    MustacheEnvironment를 소유하고, render() 한 번이 하나의 렌더 사이클입니다.
    렌더링 후에는 항상 트리를 detach합니다.

    Example:
        >>> page = Page(env, title="Demo")
        >>> page.add(new_mustache_template_panel("greeting", {"name": "World"}, resource))
        >>> html = page.render()
    """

    shell_template = "page.html"

    def __init__(self, environment: "MustacheEnvironment", title: str = ""):
        super().__init__("page")
        self.environment = environment
        self.title = title
        self._sequence = 0

    def next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def render(self) -> str:
        """
        전체 페이지 렌더링 (head, body, 페이지 셸)

        Returns:
            HTML 문서
        """
        try:
            response = HeaderResponse()
            self.render_head(response)
            body = self.render_body()
            html = _shell_env.get_template(self.shell_template).render(
                title=self.title,
                head=Markup(response.get_markup()),
                body=Markup(body),
            )
            logger.debug("Page rendered", page=type(self).__name__, head_items=len(response.items))
            return html
        finally:
            self.detach()
