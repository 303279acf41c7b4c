"""에러 코드 정의

mustache-web의 모든 에러를 카테고리별로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """mustache-web 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        10xx: Template 관련 에러
        20xx: Component 관련 에러
        30xx: JSON 관련 에러
        40xx: Config 관련 에러
        50xx: Resource 관련 에러
        90xx: 기타 에러
    """

    # ==================== Template 관련 (1000-1999) ====================
    TEMPLATE_COMPILE_FAILED = 1001
    """템플릿 컴파일(실행) 실패"""

    TEMPLATE_NOT_FOUND = 1002
    """템플릿 리소스를 찾을 수 없음"""

    TEMPLATE_EXECUTION_FAILED = 1003
    """템플릿 스크립트 실행 실패 (헤더 기여 / data-template 첨부)"""

    # ==================== Component 관련 (2000-2999) ====================
    STRUCTURAL_CONFLICT = 2001
    """원시 렌더링 컨테이너에 자식 컴포넌트가 추가됨"""

    COMPONENT_NOT_ATTACHED = 2002
    """컴포넌트가 페이지에 추가되지 않음"""

    # ==================== JSON 관련 (3000-3999) ====================
    JSON_PARSE_FAILED = 3001
    """JSON 문자열 파싱 실패"""

    JSON_MAPPING_FAILED = 3002
    """객체 그래프 매핑 실패"""

    # ==================== Config 관련 (4000-4999) ====================
    CONFIG_LOAD_FAILED = 4001
    """설정 파일 로드 실패"""

    CONFIG_INVALID = 4002
    """설정 파일 형식 오류"""

    # ==================== Resource 관련 (5000-5999) ====================
    RESOURCE_NOT_FOUND = 5001
    """리소스를 찾을 수 없음"""

    RESOURCE_READ_FAILED = 5002
    """리소스 읽기 실패"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'TEMPLATE_NOT_FOUND (1002)')"""
        return f"{self.name} ({self.value})"

    @property
    def category(self) -> str:
        """에러 카테고리 반환"""
        code = self.value
        if 1000 <= code < 2000:
            return "Template"
        elif 2000 <= code < 3000:
            return "Component"
        elif 3000 <= code < 4000:
            return "Json"
        elif 4000 <= code < 5000:
            return "Config"
        elif 5000 <= code < 6000:
            return "Resource"
        else:
            return "Other"
