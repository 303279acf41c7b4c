"""에러 관리 모듈

mustache-web의 표준화된 에러 코드 및 에러 처리 기능을 제공합니다.
"""

from .error_codes import ErrorCode
from .error_messages import ERROR_MESSAGES, get_error_message, format_error_message
from .error_handler import (
    MustacheWebError,
    TemplateError,
    StructuralConflictError,
    ParseError,
    ConfigError,
    ResourceError,
    ERROR_CLASS_MAPPING,
    handle_error,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "get_error_message",
    "format_error_message",
    "MustacheWebError",
    "TemplateError",
    "StructuralConflictError",
    "ParseError",
    "ConfigError",
    "ResourceError",
    "ERROR_CLASS_MAPPING",
    "handle_error",
]
