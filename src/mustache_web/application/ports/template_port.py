"""
템플릿 포트 (인터페이스)

ITemplateResource: 템플릿 소스 리소스 인터페이스
ITemplateEngine: mustache 컴파일 엔진 인터페이스
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


# 부분 템플릿 이름 → 소스 텍스트 (없으면 None)
PartialLookup = Callable[[str], Optional[str]]


class ITemplateResource(ABC):
    """
    템플릿 리소스 인터페이스

    Infrastructure 계층에서 구현됨 (패키지 리소스, 파일, 문자열)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """리소스 이름 (진단 메시지용)"""
        pass

    @abstractmethod
    def read(self) -> str:
        """
        템플릿 소스 읽기

        Returns:
            템플릿 소스 텍스트

        Raises:
            ResourceError: 리소스가 없거나 읽을 수 없는 경우
        """
        pass

    @abstractmethod
    def resolve_partial(self, partial_name: str) -> Optional["ITemplateResource"]:
        """
        부분 템플릿 리소스 조회

        Args:
            partial_name: 부분 템플릿 이름 ({{> name}})

        Returns:
            리소스 또는 None (부분 템플릿을 지원하지 않는 경우)
        """
        pass


class ITemplateEngine(ABC):
    """
    mustache 컴파일 엔진 인터페이스

    Infrastructure 계층에서 구현됨 (pystache)
    """

    @abstractmethod
    def compile(
        self,
        source: str,
        template_id: str,
        scope: Any = None,
        partials: Optional[PartialLookup] = None
    ) -> str:
        """
        템플릿 소스를 스코프에 대해 컴파일(실행)

        Args:
            source: 템플릿 소스
            template_id: 템플릿 식별자 (진단용)
            scope: 스코프 (매핑, 시퀀스, 임의 객체)
            partials: 부분 템플릿 조회 함수 (선택)

        Returns:
            컴파일된 출력 문자열

        Raises:
            TemplateError: 엔진 실패 시
        """
        pass
