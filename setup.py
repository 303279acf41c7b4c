#!/usr/bin/env python3
"""
mustache-web - Mustache 템플릿 웹 바인딩
Setup script for package installation
"""

from setuptools import setup, find_packages

# Read README file for long description
def read_file(filename):
    """Read file contents."""
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return ""

# Read requirements from requirements.txt
def read_requirements():
    """Read requirements from requirements.txt."""
    requirements = []
    try:
        with open('requirements.txt', 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if line and not line.startswith('#'):
                    requirements.append(line)
    except FileNotFoundError:
        pass
    return requirements

TEST_REQUIREMENTS = [
    "pytest>=7.0.0",
    "pytest-asyncio>=0.21.0",
    "httpx>=0.24.0",
]

setup(
    name="mustache-web",
    version="0.1.0",
    author="mustache-web Team",
    description="컴포넌트 기반 웹 UI를 위한 mustache 템플릿 바인딩 - 서버 측 컴파일, mustache.js 클라이언트 렌더링, JSON 변환 헬퍼",
    long_description=read_file("README.md") or "mustache-web - Mustache template binding for component-based web UIs",
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    package_data={
        "mustache_web.presentation.components": ["templates/*.html"],
        "mustache_web.presentation.web.sample": ["*.mustache"],
    },
    data_files=[
        ("config", ["config/mustache_config.json"]),
    ],
    entry_points={
        "console_scripts": [
            "mustache-web=mustache_web.presentation.cli.template_commands:main",
            "mustache-web-server=mustache_web.presentation.web.app:main",
        ],
    },
    install_requires=read_requirements() or [
        "pystache>=0.6.5",
        "pydantic>=2.0.0",
        "pydantic-core>=2.0.0",
        "json5>=0.9.14",
        "structlog>=23.1.0",
        "jinja2>=3.1.0",
        "markupsafe>=2.1.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "python-dotenv>=1.0.0",
        "click>=8.1.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": TEST_REQUIREMENTS,
        "dev": TEST_REQUIREMENTS + [
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Text Processing :: Markup :: HTML",
        "Operating System :: OS Independent",
    ],
    keywords="mustache, templates, fastapi, json, web",
)
