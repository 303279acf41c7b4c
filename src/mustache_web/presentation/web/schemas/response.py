"""
API 응답 스키마

Pydantic 모델로 API 응답을 정의합니다.
"""

from typing import Dict

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Health check 응답 스키마"""

    status: str = Field(..., description="서비스 상태 (ok/error)")
    message: str = Field(..., description="상태 메시지")
    mustache_js_version: str = Field(..., description="클라이언트 렌더링에 사용하는 mustache.js 버전")


class ErrorResponse(BaseModel):
    """에러 응답 스키마 (MustacheWebError.to_dict 형식)"""

    error_code: str = Field(..., description="에러 코드 이름")
    error_number: int = Field(..., description="4자리 에러 번호")
    category: str = Field(..., description="에러 카테고리")
    message: str = Field(..., description="에러 메시지")
    context: Dict[str, str] = Field(default_factory=dict, description="에러 컨텍스트")
