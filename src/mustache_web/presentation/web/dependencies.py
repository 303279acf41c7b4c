"""
FastAPI 의존성

요청에서 앱에 설치된 MustacheEnvironment를 꺼냅니다.
"""

from fastapi import HTTPException, Request

from mustache_web.application.environment import MustacheEnvironment


def get_environment(request: Request) -> MustacheEnvironment:
    """
    설치된 MustacheEnvironment 조회

    Raises:
        HTTPException: install()이 호출되지 않은 경우 (500)
    """
    environment = getattr(request.app.state, "mustache_environment", None)
    if environment is None:
        raise HTTPException(status_code=500, detail="MustacheEnvironment가 설치되지 않았습니다")
    return environment
