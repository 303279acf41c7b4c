"""
템플릿 도메인 모델

resolve_template_name: 템플릿 이름 결정 (기본값: "<클래스명>.mustache")
"""

from typing import Any, Optional


TEMPLATE_EXTENSION = ".mustache"

# 클라이언트 렌더링용 원시 템플릿을 담는 요소 속성
DATA_TEMPLATE_ATTRIBUTE = "data-template"


def resolve_template_name(
    explicit: Optional[str],
    reference_type: Any,
    extension: str = TEMPLATE_EXTENSION
) -> str:
    """
    렌더링 대상의 템플릿 식별자 결정

    명시적인 이름이 비어 있으면 참조 타입의 단순 클래스명에
    ".mustache"를 붙인 이름을 사용합니다. 그 외에는 이름을 그대로
    사용하며, 이스케이프나 경로 정규화는 하지 않습니다.

    Args:
        explicit: 명시적 템플릿 이름 (None 또는 공백 가능)
        reference_type: 바인딩된 컴포넌트의 타입 (인스턴스도 허용)
        extension: 기본 이름에 붙일 확장자 (설정 template_extension)

    Returns:
        비어 있지 않은 템플릿 식별자

    Examples:
        >>> class HomePage: pass
        >>> resolve_template_name(None, HomePage)
        'HomePage.mustache'
        >>> resolve_template_name("panel.mustache", HomePage)
        'panel.mustache'
    """
    if explicit is None or not explicit.strip():
        if not isinstance(reference_type, type):
            reference_type = type(reference_type)
        return f"{reference_type.__name__}{extension}"

    return explicit
