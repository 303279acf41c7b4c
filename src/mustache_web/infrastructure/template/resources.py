"""
템플릿 소스 로더

PackageResource: 타입이 정의된 모듈 옆의 파일 (클래스 상대 리소스)
FileResource: 파일 시스템 경로
StringResource: 메모리 내 문자열
"""

import inspect
from pathlib import Path
from typing import Any, Optional, Union

from mustache_web.application.ports.template_port import ITemplateResource
from mustache_web.domain.errors import ErrorCode, handle_error
from mustache_web.domain.models.template import TEMPLATE_EXTENSION


def _read_file(path: Path, encoding: str, resource_name: str) -> str:
    """파일 읽기 (리소스 에러로 변환)"""
    if not path.is_file():
        raise handle_error(ErrorCode.RESOURCE_NOT_FOUND, resource=resource_name)

    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise handle_error(
            ErrorCode.RESOURCE_READ_FAILED,
            original_error=e,
            resource=resource_name
        )


class FileResource(ITemplateResource):
    """
    파일 시스템 템플릿 리소스

    부분 템플릿은 같은 디렉토리의 "<이름><확장자>" 파일로 해석합니다.
    """

    def __init__(
        self,
        path: Union[str, Path],
        encoding: str = "utf-8",
        extension: str = TEMPLATE_EXTENSION
    ):
        """
        Args:
            path: 템플릿 파일 경로
            encoding: 파일 인코딩
            extension: 부분 템플릿 파일 확장자
        """
        self.path = Path(path)
        self.encoding = encoding
        self.extension = extension

    @property
    def name(self) -> str:
        return self.path.name

    def read(self) -> str:
        return _read_file(self.path, self.encoding, str(self.path))

    def resolve_partial(self, partial_name: str) -> Optional[ITemplateResource]:
        partial_path = self.path.parent / f"{partial_name}{self.extension}"
        return FileResource(partial_path, self.encoding, self.extension)

    def __repr__(self) -> str:
        return f"FileResource({str(self.path)!r})"


class PackageResource(ITemplateResource):
    """
    클래스 상대 템플릿 리소스

    reference_type을 정의한 모듈과 같은 디렉토리에서 name 파일을 찾습니다.

    Example:
        >>> resource = PackageResource(HomePage, "HomePage.mustache")
        >>> resource.read()
        '<h1>{{title}}</h1>'
    """

    def __init__(
        self,
        reference_type: Any,
        name: str,
        encoding: str = "utf-8",
        extension: str = TEMPLATE_EXTENSION
    ):
        """
        Args:
            reference_type: 기준 타입 (인스턴스도 허용)
            name: 리소스 이름 (기준 디렉토리 상대 경로)
            encoding: 파일 인코딩
            extension: 부분 템플릿 파일 확장자
        """
        if not isinstance(reference_type, type):
            reference_type = type(reference_type)
        self.reference_type = reference_type
        self._name = name
        self.encoding = encoding
        self.extension = extension

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> Path:
        """리소스 파일 경로"""
        try:
            module_file = inspect.getfile(self.reference_type)
        except TypeError as e:
            raise handle_error(
                ErrorCode.RESOURCE_NOT_FOUND,
                original_error=e,
                resource=self._qualified_name()
            )
        return Path(module_file).parent / self._name

    def read(self) -> str:
        return _read_file(self.path, self.encoding, self._qualified_name())

    def resolve_partial(self, partial_name: str) -> Optional[ITemplateResource]:
        return PackageResource(
            self.reference_type, f"{partial_name}{self.extension}", self.encoding, self.extension
        )

    def _qualified_name(self) -> str:
        return f"{self.reference_type.__module__}:{self._name}"

    def __repr__(self) -> str:
        return f"PackageResource({self.reference_type.__name__}, {self._name!r})"


class StringResource(ITemplateResource):
    """메모리 내 템플릿 (부분 템플릿 없음)"""

    def __init__(self, text: Optional[str], name: str = "<string>"):
        self.text = text
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def read(self) -> Optional[str]:
        return self.text

    def resolve_partial(self, partial_name: str) -> Optional[ITemplateResource]:
        return None


def read_string(resource: Optional[ITemplateResource]) -> str:
    """
    리소스 내용을 문자열로 읽기

    Args:
        resource: 템플릿 리소스

    Returns:
        템플릿 소스

    Raises:
        ValueError: 리소스가 None이거나 내용이 없는 경우
        ResourceError: 리소스를 읽을 수 없는 경우
    """
    if resource is None:
        raise ValueError("template resource is None")

    content = resource.read()
    if content is None:
        raise ValueError("can't find template content")
    return content
