"""
설정 로더 구현

MustacheSettings: mustache-web 설정 (프로세스 시작 시 한 번 생성)
JsonConfigLoader: config/mustache_config.json에서 설정 로드
load_settings: 파일 + 환경변수(MUSTACHE_WEB_*)를 반영한 설정 로드
"""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from mustache_web.domain.errors import ErrorCode, handle_error
from mustache_web.infrastructure.logging import get_logger
from .env_utils import parse_bool_env, parse_int_env, parse_str_env

logger = get_logger(__name__, component="ConfigLoader")

MISSING_TAGS_POLICIES = ("ignore", "strict")


@dataclass
class MustacheSettings:
    """
    mustache-web 설정

    JSON 파일에서 로드된 설정
    딕셔너리 접근도 지원
    """
    # Template 설정
    template_extension: str = ".mustache"
    file_encoding: str = "utf-8"
    missing_tags: str = "ignore"
    escape_html: bool = False

    # Client 설정
    mustache_js_version: str = "4.2.0"
    mustache_js_url: str = "https://cdnjs.cloudflare.com/ajax/libs/mustache.js/{version}/mustache.min.js"
    jquery_url: str = "https://code.jquery.com/jquery-3.7.1.min.js"
    callback_path: str = "/_mustache/callback"
    lazy_load_delay_ms: int = 0
    loading_message: str = "loading..."
    max_callbacks: int = 256

    # Logging 설정
    log_level: str = "INFO"
    log_dir: str = "logs"
    enable_json_logging: bool = True

    _raw_data: dict = field(default_factory=dict, init=False, repr=False)

    def mustache_js_src(self, version: Optional[str] = None) -> str:
        """
        mustache.js 스크립트 URL

        Args:
            version: 사용할 버전 (None이면 설정값)

        Returns:
            버전이 반영된 URL
        """
        return self.mustache_js_url.format(version=version or self.mustache_js_version)

    def get(self, key: str, default=None):
        """
        딕셔너리처럼 get() 메서드 제공

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정 값 또는 기본값
        """
        if not key.startswith("_") and hasattr(self, key):
            return getattr(self, key)

        return self._raw_data.get(key, default)

    def __getitem__(self, key: str):
        """
        딕셔너리처럼 [] 접근 제공

        Raises:
            KeyError: 키가 없을 경우
        """
        if not key.startswith("_") and hasattr(self, key):
            return getattr(self, key)

        if key in self._raw_data:
            return self._raw_data[key]
        raise KeyError(f"설정 키를 찾을 수 없습니다: {key}")


class JsonConfigLoader:
    """
    JSON 설정 로더

    config/mustache_config.json에서 설정 로드
    """

    def __init__(self, project_root: Path):
        """
        Args:
            project_root: 프로젝트 루트 디렉토리
        """
        self.project_root = Path(project_root)
        self.config_path = self.project_root / "config" / "mustache_config.json"

    def load_settings(self) -> MustacheSettings:
        """
        설정 로드

        파일이 없으면 기본값을 사용합니다.

        Returns:
            MustacheSettings 객체

        Raises:
            ConfigError: 파일을 읽을 수 없거나 형식이 잘못된 경우
        """
        if not self.config_path.exists():
            logger.warning("Config file not found, using defaults", config_path=str(self.config_path))
            return MustacheSettings()

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                original_error=e,
                file_path=str(self.config_path)
            )
        except OSError as e:
            raise handle_error(
                ErrorCode.CONFIG_LOAD_FAILED,
                original_error=e,
                file_path=str(self.config_path)
            )

        if not isinstance(data, dict):
            raise handle_error(
                ErrorCode.CONFIG_INVALID,
                file_path=str(self.config_path),
                error="최상위 값은 객체여야 합니다"
            )

        defaults = MustacheSettings()
        template = data.get("template", {})
        client = data.get("client", {})
        logging_config = data.get("logging", {})

        config = MustacheSettings(
            template_extension=template.get("extension", defaults.template_extension),
            file_encoding=template.get("encoding", defaults.file_encoding),
            missing_tags=template.get("missing_tags", defaults.missing_tags),
            escape_html=template.get("escape_html", defaults.escape_html),
            mustache_js_version=client.get("mustache_js_version", defaults.mustache_js_version),
            mustache_js_url=client.get("mustache_js_url", defaults.mustache_js_url),
            jquery_url=client.get("jquery_url", defaults.jquery_url),
            callback_path=client.get("callback_path", defaults.callback_path),
            lazy_load_delay_ms=client.get("lazy_load_delay_ms", defaults.lazy_load_delay_ms),
            loading_message=client.get("loading_message", defaults.loading_message),
            max_callbacks=client.get("max_callbacks", defaults.max_callbacks),
            log_level=logging_config.get("level", defaults.log_level),
            log_dir=logging_config.get("dir", defaults.log_dir),
            enable_json_logging=logging_config.get("enable_json", defaults.enable_json_logging),
        )
        validate_settings(config, str(self.config_path))

        # 원본 데이터 저장 (딕셔너리 접근용)
        config._raw_data = data

        logger.info("Settings loaded", config_path=str(self.config_path))
        return config


def validate_settings(settings: MustacheSettings, source: str = "<settings>") -> None:
    """
    설정 값 검증

    Args:
        settings: 검증할 설정
        source: 에러 메시지에 표시할 설정 출처

    Raises:
        ConfigError: 허용되지 않는 값이 있는 경우
    """
    if settings.missing_tags not in MISSING_TAGS_POLICIES:
        raise handle_error(
            ErrorCode.CONFIG_INVALID,
            file_path=source,
            error=f"missing_tags는 {MISSING_TAGS_POLICIES} 중 하나여야 합니다: {settings.missing_tags!r}"
        )
    if settings.lazy_load_delay_ms < 0:
        raise handle_error(
            ErrorCode.CONFIG_INVALID,
            file_path=source,
            error=f"lazy_load_delay_ms는 0 이상이어야 합니다: {settings.lazy_load_delay_ms}"
        )
    if settings.max_callbacks < 1:
        raise handle_error(
            ErrorCode.CONFIG_INVALID,
            file_path=source,
            error=f"max_callbacks는 1 이상이어야 합니다: {settings.max_callbacks}"
        )


def apply_env_overrides(settings: MustacheSettings) -> MustacheSettings:
    """
    MUSTACHE_WEB_* 환경변수로 설정 덮어쓰기

    Args:
        settings: 기준 설정

    Returns:
        환경변수가 반영된 새 설정 객체
    """
    overridden = replace(
        settings,
        escape_html=parse_bool_env("MUSTACHE_WEB_ESCAPE_HTML", settings.escape_html),
        missing_tags=parse_str_env("MUSTACHE_WEB_MISSING_TAGS", settings.missing_tags),
        mustache_js_version=parse_str_env("MUSTACHE_WEB_MUSTACHE_JS_VERSION", settings.mustache_js_version),
        lazy_load_delay_ms=parse_int_env("MUSTACHE_WEB_LAZY_DELAY_MS", settings.lazy_load_delay_ms),
        log_level=parse_str_env("MUSTACHE_WEB_LOG_LEVEL", settings.log_level),
        log_dir=parse_str_env("MUSTACHE_WEB_LOG_DIR", settings.log_dir),
        enable_json_logging=parse_bool_env("MUSTACHE_WEB_JSON_LOGS", settings.enable_json_logging),
    )
    overridden._raw_data = settings._raw_data
    validate_settings(overridden, "environment")
    return overridden


def load_settings(project_root: Optional[Path] = None, apply_env: bool = True) -> MustacheSettings:
    """
    설정을 MustacheSettings 객체로 로드 (간편 함수)

    Args:
        project_root: 프로젝트 루트 (None이면 현재 작업 디렉토리)
        apply_env: 환경변수 덮어쓰기 적용 여부

    Returns:
        MustacheSettings: 설정 객체 (파일이 없으면 기본 설정)

    Raises:
        ConfigError: 설정 파일 형식이 잘못된 경우
    """
    loader = JsonConfigLoader(project_root or Path.cwd())
    settings = loader.load_settings()
    if apply_env:
        settings = apply_env_overrides(settings)
    return settings
