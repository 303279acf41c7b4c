"""
AJAX 콜백 라우터

지연 로딩 패널이 등록한 콜백을 실행하고 JavaScript를 응답합니다.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from mustache_web.application.environment import MustacheEnvironment
from mustache_web.infrastructure.logging import get_logger
from mustache_web.presentation.web.dependencies import get_environment

logger = get_logger(__name__, component="CallbackRouter")

JAVASCRIPT_MEDIA_TYPE = "application/javascript"


def create_callback_router(callback_path: str) -> APIRouter:
    """
    콜백 라우터 생성

    Args:
        callback_path: 콜백 경로 접두사 (예: "/_mustache/callback")

    Returns:
        GET {callback_path}/{token} 라우트를 가진 APIRouter
    """
    router = APIRouter(prefix=callback_path.rstrip("/"), tags=["callbacks"])

    @router.get("/{token}")
    def invoke_callback(token: str, environment: MustacheEnvironment = Depends(get_environment)) -> Response:
        """
        콜백 실행

        Raises:
            HTTPException: 알 수 없는(또는 만료된) 토큰 (404)
        """
        try:
            script = environment.callbacks.invoke(token)
        except KeyError:
            logger.warning("Unknown callback token", token=token)
            raise HTTPException(status_code=404, detail=f"알 수 없는 콜백입니다: {token}")

        return Response(content=script, media_type=JAVASCRIPT_MEDIA_TYPE)

    return router
