"""
mustache-web CLI 명령어

템플릿 렌더링, JSON 검증/정리, 웹 서버 실행 명령어를 제공합니다.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from mustache_web.application.environment import MustacheEnvironment
from mustache_web.domain.errors import MustacheWebError
from mustache_web.infrastructure.config import load_settings, parse_bool_env, parse_str_env
from mustache_web.infrastructure.logging import configure_structlog
from mustache_web.infrastructure.serialization import JsonMapper
from mustache_web.infrastructure.template import FileResource

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """
    로깅 설정 (구조화된 로깅 사용)

    CLI 출력과 섞이지 않도록 기본 레벨은 WARNING입니다.

    Args:
        verbose: 상세 로깅 활성화 여부
    """
    log_level = "DEBUG" if verbose else parse_str_env("MUSTACHE_WEB_LOG_LEVEL", "WARNING")

    configure_structlog(
        log_dir=parse_str_env("MUSTACHE_WEB_LOG_DIR", None),
        log_level=log_level,
        enable_json=parse_bool_env("MUSTACHE_WEB_JSON_LOGS", True)
    )


def get_environment(strict: bool = False) -> MustacheEnvironment:
    """설정을 로드하여 MustacheEnvironment 생성"""
    settings = load_settings()
    if strict:
        settings.missing_tags = "strict"
    return MustacheEnvironment(settings)


@click.group(name="mustache-web")
@click.version_option(package_name="mustache-web")
@click.option("--verbose", "-v", is_flag=True, default=False, help="상세 로깅 활성화")
def cli(verbose: bool):
    """mustache 템플릿 렌더링 도구"""
    setup_logging(verbose)


@cli.command(name="render")
@click.argument("template", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--data", "-d", "data_text", help="스코프 JSON (작은따옴표/따옴표 없는 키 허용)")
@click.option("--data-file", "-f", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="스코프 JSON 파일")
@click.option("--escape", is_flag=True, default=False, help="출력 전체를 HTML 이스케이프 (기본: 설정 escape_html)")
@click.option("--strict", is_flag=True, default=False, help="누락된 태그를 에러로 처리")
def render_template(
    template: Path,
    data_text: Optional[str],
    data_file: Optional[Path],
    escape: bool,
    strict: bool
):
    """
    템플릿 파일을 서버 측에서 컴파일

    Examples:
        mustache-web render greeting.mustache --data "{name: 'World'}"
        mustache-web render page.mustache --data-file scope.json --escape
    """
    if data_text is not None and data_file is not None:
        console.print("[red]--data와 --data-file은 함께 사용할 수 없습니다[/red]")
        raise click.Abort()

    try:
        environment = get_environment(strict)

        if data_file is not None:
            data_text = data_file.read_text(encoding=environment.settings.file_encoding)
        scope = environment.json_mapper.parse(data_text)

        settings = environment.settings
        resource = FileResource(template, settings.file_encoding, settings.template_extension)
        output = environment.compile(
            resource, template.name, data=scope, escape_html=escape or settings.escape_html
        )

    except MustacheWebError as e:
        console.print(f"렌더링 실패: {e}", style="red", markup=False, highlight=False)
        raise click.Abort()
    except OSError as e:
        console.print(f"파일을 읽을 수 없습니다: {e}", style="red", markup=False, highlight=False)
        raise click.Abort()

    click.echo(output, nl=False)


@cli.group(name="json")
def json_commands():
    """JSON 도구"""
    pass


@json_commands.command(name="validate")
@click.argument("text")
def validate_json(text: str):
    """
    JSON 텍스트 검증 (관대한 문법 포함)

    Examples:
        mustache-web json validate "{a: 'b'}"
    """
    if JsonMapper().is_valid(text):
        console.print("[green]✓ 유효한 JSON입니다[/green]")
        return

    console.print("[red]✗ 유효하지 않은 JSON입니다[/red]")
    raise click.Abort()


@json_commands.command(name="format")
@click.argument("text")
def format_json(text: str):
    """
    JSON 텍스트를 표준 JSON으로 정리

    Examples:
        mustache-web json format "{a: 'b'}"
        → {"a":"b"}
    """
    mapper = JsonMapper()
    try:
        output = mapper.stringify(mapper.parse(text))
    except MustacheWebError as e:
        console.print(str(e), style="red", markup=False, highlight=False)
        raise click.Abort()

    click.echo(output)


@cli.command(name="serve")
@click.option("--host", default=None, help="바인딩 호스트 (기본: MUSTACHE_WEB_HOST 또는 127.0.0.1)")
@click.option("--port", default=None, type=int, help="포트 (기본: MUSTACHE_WEB_PORT 또는 8000)")
def serve(host: Optional[str], port: Optional[int]):
    """샘플 웹 서버 실행"""
    import os

    from mustache_web.presentation.web.app import main

    if host:
        os.environ["MUSTACHE_WEB_HOST"] = host
    if port:
        os.environ["MUSTACHE_WEB_PORT"] = str(port)
    main()


def main():
    cli()


if __name__ == "__main__":
    main()
