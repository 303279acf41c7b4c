"""
샘플 페이지 라우터
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from mustache_web.application.environment import MustacheEnvironment
from mustache_web.presentation.web.dependencies import get_environment
from mustache_web.presentation.web.sample import HomePage

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
def home(environment: MustacheEnvironment = Depends(get_environment)) -> HTMLResponse:
    """서버/클라이언트 렌더링 샘플 페이지"""
    return HTMLResponse(HomePage(environment).render())
