"""FastAPI 앱 - mustache-web 호스트"""
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mustache_web import __version__
from mustache_web.application.environment import MustacheEnvironment
from mustache_web.domain.errors import MustacheWebError, ParseError
from mustache_web.infrastructure.config import MustacheSettings, load_settings, parse_int_env, parse_str_env
from mustache_web.infrastructure.logging import configure_structlog, get_logger
from mustache_web.presentation.web.routers import create_callback_router, health_router, home_router

logger = get_logger(__name__, component="WebApp")


async def mustache_error_handler(request: Request, exc: MustacheWebError) -> JSONResponse:
    """
    MustacheWebError → JSON 응답

    ParseError는 400, 그 외는 500으로 응답합니다.
    """
    status_code = 400 if isinstance(exc, ParseError) else 500
    logger.error(
        "Request failed",
        path=request.url.path,
        error_code=exc.error_code.name,
        status_code=status_code
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def install(app: FastAPI, environment: MustacheEnvironment) -> FastAPI:
    """
    FastAPI 앱에 mustache-web 설치

    - app.state에 environment 저장
    - AJAX 콜백 라우터 추가
    - MustacheWebError 예외 처리기 등록

    Args:
        app: FastAPI 앱
        environment: MustacheEnvironment

    Returns:
        같은 앱 (체이닝)
    """
    app.state.mustache_environment = environment
    app.include_router(create_callback_router(environment.settings.callback_path))
    app.add_exception_handler(MustacheWebError, mustache_error_handler)

    logger.info("mustache-web installed", callback_path=environment.settings.callback_path)
    return app


def create_app(settings: Optional[MustacheSettings] = None) -> FastAPI:
    """
    mustache-web 샘플 앱 생성

    Args:
        settings: 설정 (None이면 config/mustache_config.json + 환경변수)

    Returns:
        FastAPI 앱
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        FastAPI Lifespan Context Manager

        startup 시 로깅을 설정합니다.
        """
        # Startup
        configure_structlog(
            log_dir=settings.log_dir,
            log_level=settings.log_level,
            enable_json=settings.enable_json_logging
        )
        logger.info("mustache-web 시작", mustache_js_version=settings.mustache_js_version)

        yield  # 애플리케이션 실행 중

        # Shutdown
        logger.info("mustache-web 종료")

    app = FastAPI(title="mustache-web", version=__version__, lifespan=lifespan)
    install(app, MustacheEnvironment(settings))

    app.include_router(health_router)
    app.include_router(home_router)
    return app


def main():
    import uvicorn

    # .env 파일 로드 (프로젝트 루트)
    load_dotenv()

    host = parse_str_env("MUSTACHE_WEB_HOST", "127.0.0.1")
    port = parse_int_env("MUSTACHE_WEB_PORT", 8000)

    print("╔════════════════════════════════════════════╗")
    print("║   mustache-web                             ║")
    print("╚════════════════════════════════════════════╝")
    print()
    print(f"🚀 웹 서버: http://{host}:{port}")
    print()
    print("   Ctrl+C로 종료")
    print()

    uvicorn.run(
        "mustache_web.presentation.web.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=os.getenv("MUSTACHE_WEB_UVICORN_LOG_LEVEL", "info")
    )


if __name__ == "__main__":
    main()
