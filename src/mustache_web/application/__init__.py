"""
Application Layer

컴파일 환경, 렌더 캐시, 콜백 레지스트리와 포트 인터페이스

Structure:
- ports: Infrastructure 계층이 구현하는 인터페이스
- services: 렌더 캐시, 콜백 레지스트리
- environment: 컴파일 설정 객체 (MustacheEnvironment)
"""

from .ports import ITemplateEngine, ITemplateResource

__all__ = [
    "ITemplateEngine",
    "ITemplateResource",
]
