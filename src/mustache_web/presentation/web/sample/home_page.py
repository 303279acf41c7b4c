"""
샘플 페이지

같은 템플릿을 서버 측, 클라이언트 측, 지연 로딩 클라이언트 측으로
각각 렌더링하고, 페이지 head에는 HomePage.mustache를 컴파일해 넣습니다.
"""

from typing import TYPE_CHECKING

from mustache_web.domain.models.scope import ScopedMap, new_scoped_map
from mustache_web.infrastructure.template import PackageResource
from mustache_web.presentation.components import (
    ClientSideMustachePanel,
    LazyLoadingClientSideMustachePanel,
    LoadableDetachableModel,
    MustachePanel,
    MustacheTemplate,
    Page,
)

if TYPE_CHECKING:
    from mustache_web.application.environment import MustacheEnvironment

TEMPLATE_NAME = "template.mustache"


def load_items() -> ScopedMap:
    """샘플 스코프: 상품 목록"""
    return new_scoped_map({
        "items": [
            {"name": "Item 1", "price": "$19.99", "features": ["New!", "Awesome!"]},
            {"name": "Item 2", "price": "$29.99", "features": ["Old!", "Ugly!"]},
        ]
    })


class HomePage(Page):
    """mustache-web 샘플 페이지"""

    def __init__(self, environment: "MustacheEnvironment"):
        super().__init__(environment, title="mustache-web")

        scope_model = LoadableDetachableModel(load_items)
        encoding = environment.settings.file_encoding

        self.add(
            MustachePanel("template", scope_model, PackageResource(HomePage, TEMPLATE_NAME, encoding)),
            ClientSideMustachePanel("template-client", scope_model, PackageResource(HomePage, TEMPLATE_NAME, encoding)),
            LazyLoadingClientSideMustachePanel(
                "template-lazy", scope_model, PackageResource(HomePage, TEMPLATE_NAME, encoding)
            ),
        )
        self.add_behavior(MustacheTemplate({"price_color": "#c0392b"}))
