"""에러 핸들러

mustache-web의 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.

모든 예외는 이 계층에서 복구되지 않으며, 호스트 웹 프레임워크의
최상위 에러 처리기(`presentation.web.install`이 등록)까지 전파됩니다.
"""

from typing import Optional, Dict, Any
from .error_codes import ErrorCode
from .error_messages import format_error_message


class MustacheWebError(Exception):
    """mustache-web의 기본 예외 클래스

    모든 mustache-web 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise MustacheWebError(
        ...     ErrorCode.TEMPLATE_NOT_FOUND,
        ...     template_id="HomePage.mustache",
        ...     error="no such file"
        ... )
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error is not None and "error" not in self.context:
            self.context["error"] = str(original_error)

        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

        if original_error is not None:
            self.__cause__ = original_error

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅/API 응답용)

        Returns:
            에러 정보를 담은 딕셔너리

        Examples:
            >>> error.to_dict()
            {
                "error_code": "TEMPLATE_NOT_FOUND",
                "error_number": 1002,
                "category": "Template",
                "message": "mustache 템플릿 'HomePage.mustache'을...",
                "context": {"template_id": "HomePage.mustache", "error": "..."}
            }
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": {key: str(value) for key, value in self.context.items()},
        }

    def __str__(self) -> str:
        """에러를 문자열로 반환"""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """에러의 상세 표현 반환"""
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


class TemplateError(MustacheWebError):
    """템플릿 해석/컴파일 실패

    원인 예외와 템플릿 식별자를 함께 보고합니다. 현재 렌더링에 치명적이며
    재시도하지 않습니다.
    """

    @property
    def template_id(self) -> Optional[str]:
        """실패한 템플릿 식별자"""
        return self.context.get("template_id")


class StructuralConflictError(MustacheWebError):
    """원시 템플릿 출력을 기대하는 컨테이너에 자식 컴포넌트가 존재함 (프로그래밍 오류)"""
    pass


class ParseError(MustacheWebError):
    """JSON 텍스트 파싱 또는 객체 그래프 매핑 실패

    텍스트에서 파싱한 경우 문제가 된 입력을 `payload`로 보관합니다.
    """

    @property
    def payload(self) -> Optional[str]:
        """파싱에 실패한 원본 입력 (텍스트 파싱이 아니면 None)"""
        return self.context.get("payload")


class ConfigError(MustacheWebError):
    """Config 관련 에러"""
    pass


class ResourceError(MustacheWebError):
    """템플릿 리소스 관련 에러"""
    pass


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    # Template 에러
    ErrorCode.TEMPLATE_COMPILE_FAILED: TemplateError,
    ErrorCode.TEMPLATE_NOT_FOUND: TemplateError,
    ErrorCode.TEMPLATE_EXECUTION_FAILED: TemplateError,
    # Component 에러
    ErrorCode.STRUCTURAL_CONFLICT: StructuralConflictError,
    ErrorCode.COMPONENT_NOT_ATTACHED: StructuralConflictError,
    # JSON 에러
    ErrorCode.JSON_PARSE_FAILED: ParseError,
    ErrorCode.JSON_MAPPING_FAILED: ParseError,
    # Config 에러
    ErrorCode.CONFIG_LOAD_FAILED: ConfigError,
    ErrorCode.CONFIG_INVALID: ConfigError,
    # Resource 에러
    ErrorCode.RESOURCE_NOT_FOUND: ResourceError,
    ErrorCode.RESOURCE_READ_FAILED: ResourceError,
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> MustacheWebError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 MustacheWebError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     source = resource.read()
        ... except OSError as e:
        ...     raise handle_error(
        ...         ErrorCode.TEMPLATE_NOT_FOUND,
        ...         original_error=e,
        ...         template_id="HomePage.mustache"
        ...     )
    """
    error_class = ERROR_CLASS_MAPPING.get(error_code, MustacheWebError)

    exception = error_class(
        error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from mustache_web.infrastructure.logging import get_logger
        logger = get_logger(__name__)

        # 에러 카테고리에 따라 다르게 로깅
        if error_code.value >= 9000:
            logger.critical(
                exception.message,
                error_code=error_code.name,
                exc_info=original_error
            )
        elif error_code.category in ("Json", "Resource"):
            logger.warning(
                exception.message,
                error_code=error_code.name
            )
        else:
            logger.error(
                exception.message,
                error_code=error_code.name,
                exc_info=original_error
            )

    return exception
