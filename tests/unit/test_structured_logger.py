"""
Tests for structured logging

mustache_web/infrastructure/logging/structured_logger.py 테스트
"""
import json
import logging
import pytest
from pathlib import Path

import structlog

from mustache_web.infrastructure.logging.structured_logger import (
    configure_structlog,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """테스트 후 structlog/logging 설정 초기화"""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


@pytest.mark.unit
class TestStructuredLogger:
    """구조화된 로깅 테스트"""

    def test_configure_structlog_creates_log_files(self, tmp_path: Path):
        """로그 디렉토리와 메인/에러 로그 파일 생성"""
        log_dir = tmp_path / "logs"

        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=True)

        assert (log_dir / "mustache-web.log").exists()
        assert (log_dir / "mustache-web-error.log").exists()
        assert not (log_dir / "mustache-web-debug.log").exists()

    def test_configure_structlog_debug_mode(self, tmp_path: Path):
        """DEBUG 모드에서 디버그 로그 파일 생성"""
        log_dir = tmp_path / "logs"

        configure_structlog(log_dir=str(log_dir), log_level="DEBUG", enable_json=True)

        assert (log_dir / "mustache-web-debug.log").exists()

    def test_json_output_with_context(self, tmp_path: Path):
        """JSON 출력에 바인딩된 컨텍스트 포함"""
        log_dir = tmp_path / "logs"
        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=True)

        logger = get_logger("test.json", component="RenderCache")
        logger.info("Compiled output cached", template_id="greeting")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [
            line for line in (log_dir / "mustache-web.log").read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]
        records = [json.loads(line) for line in lines]
        record = next(r for r in records if r.get("event") == "Compiled output cached")

        assert record["component"] == "RenderCache"
        assert record["template_id"] == "greeting"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_error_log_only_errors(self, tmp_path: Path):
        """에러 로그 파일에는 ERROR 이상만 기록"""
        log_dir = tmp_path / "logs"
        configure_structlog(log_dir=str(log_dir), log_level="INFO", enable_json=True)

        logger = get_logger("test.error")
        logger.info("just info")
        logger.error("something failed")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (log_dir / "mustache-web-error.log").read_text(encoding="utf-8")
        assert "something failed" in content
        assert "just info" not in content

    def test_get_logger_without_context(self):
        """컨텍스트 없이도 로거 반환"""
        logger = get_logger(__name__)

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")
