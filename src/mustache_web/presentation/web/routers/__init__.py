"""
웹 API 라우터

FastAPI 라우터를 정의합니다.
"""

from mustache_web.presentation.web.routers.callbacks import create_callback_router
from mustache_web.presentation.web.routers.health import router as health_router
from mustache_web.presentation.web.routers.home import router as home_router

__all__ = ["create_callback_router", "health_router", "home_router"]
