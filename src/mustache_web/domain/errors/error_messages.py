"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Dict, Any
from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    # Template 관련
    ErrorCode.TEMPLATE_COMPILE_FAILED: (
        "mustache 템플릿 '{template_id}' 컴파일에 실패했습니다: {error}"
    ),
    ErrorCode.TEMPLATE_NOT_FOUND: (
        "mustache 템플릿 '{template_id}'을 찾을 수 없습니다: {error}"
    ),
    ErrorCode.TEMPLATE_EXECUTION_FAILED: (
        "mustache 템플릿 스크립트 실행 중 오류가 발생했습니다: {template_id}"
    ),
    # Component 관련
    ErrorCode.STRUCTURAL_CONFLICT: (
        "'{component_id}'에는 컴포넌트를 추가할 수 없습니다. "
        "템플릿으로 렌더링되는 컨테이너는 자식 컴포넌트를 가질 수 없습니다."
    ),
    ErrorCode.COMPONENT_NOT_ATTACHED: (
        "컴포넌트 '{component_id}'가 페이지에 추가되지 않았습니다."
    ),
    # JSON 관련
    ErrorCode.JSON_PARSE_FAILED: (
        "can't parse string [{payload}]"
    ),
    ErrorCode.JSON_MAPPING_FAILED: (
        "JSON 매핑에 실패했습니다: {error}"
    ),
    # Config 관련
    ErrorCode.CONFIG_LOAD_FAILED: (
        "설정 파일 '{file_path}'를 로드하는 데 실패했습니다: {error}"
    ),
    ErrorCode.CONFIG_INVALID: (
        "설정 파일 '{file_path}'의 형식이 올바르지 않습니다: {error}"
    ),
    # Resource 관련
    ErrorCode.RESOURCE_NOT_FOUND: (
        "리소스 '{resource}'을 찾을 수 없습니다."
    ),
    ErrorCode.RESOURCE_READ_FAILED: (
        "리소스 '{resource}' 읽기에 실패했습니다: {error}"
    ),
    # 기타
    ErrorCode.UNKNOWN_ERROR: (
        "알 수 없는 오류가 발생했습니다: {error}"
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(
        ...     ErrorCode.TEMPLATE_NOT_FOUND,
        ...     template_id="Foo.mustache",
        ...     error="no such file"
        ... )
        "mustache 템플릿 'Foo.mustache'을 찾을 수 없습니다: no such file"
    """
    template = get_error_message(error_code)

    # 템플릿에서 error_code도 사용할 수 있도록 복사본에 추가
    values = dict(context)
    values["error_code"] = error_code

    try:
        return template.format(**values)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(values.keys())}]"
        )
