"""
Health Check API 라우터

서비스 상태 확인을 위한 엔드포인트를 제공합니다.
"""

from fastapi import APIRouter, Depends

from mustache_web.application.environment import MustacheEnvironment
from mustache_web.presentation.web.dependencies import get_environment
from mustache_web.presentation.web.schemas import HealthCheckResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(environment: MustacheEnvironment = Depends(get_environment)) -> HealthCheckResponse:
    """
    서비스 상태 확인

    Returns:
        HealthCheckResponse: 서비스 상태 정보

    Example:
        GET /health
        Response: {"status": "ok", "message": "Service is running", "mustache_js_version": "4.2.0"}
    """
    return HealthCheckResponse(
        status="ok",
        message="Service is running",
        mustache_js_version=environment.settings.mustache_js_version
    )
