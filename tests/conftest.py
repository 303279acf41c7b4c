"""Pytest configuration and fixtures."""

import sys
import pytest
from pathlib import Path

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from mustache_web.application.environment import MustacheEnvironment  # noqa: E402
from mustache_web.infrastructure.config import MustacheSettings  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 단위 테스트")
    config.addinivalue_line("markers", "integration: 통합 테스트")


@pytest.fixture
def project_root_path() -> Path:
    """Get project root path."""
    return project_root


@pytest.fixture
def settings() -> MustacheSettings:
    """기본 설정"""
    return MustacheSettings()


@pytest.fixture
def environment(settings: MustacheSettings) -> MustacheEnvironment:
    """기본 설정의 MustacheEnvironment"""
    return MustacheEnvironment(settings)


@pytest.fixture
def clean_env(monkeypatch):
    """MUSTACHE_WEB_* 환경변수 제거"""
    import os

    for key in list(os.environ):
        if key.startswith("MUSTACHE_WEB_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
