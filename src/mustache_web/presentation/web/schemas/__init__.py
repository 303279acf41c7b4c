"""
웹 API 스키마

Pydantic 모델로 응답 스키마를 정의합니다.
"""

from .response import ErrorResponse, HealthCheckResponse

__all__ = ["ErrorResponse", "HealthCheckResponse"]
