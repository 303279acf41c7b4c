"""
JSON 변환 헬퍼

객체 그래프 → JSON 트리 변환(pydantic-core), JSON 트리/텍스트 → 타입 값
매핑(pydantic TypeAdapter), 관대한 JSON 파싱(작은따옴표 문자열, 따옴표 없는
키 허용)을 제공합니다. 모든 실패는 ParseError로 통일됩니다.
"""

import json
import re
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Optional, Type

import json5
from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from mustache_web.domain.errors import ErrorCode, MustacheWebError, handle_error
from mustache_web.domain.models.scope import Scope
from mustache_web.infrastructure.logging import get_logger

logger = get_logger(__name__, component="JsonMapper")

Serializer = Callable[[Any], Any]

# JSON 숫자 문법 (16진수, 부호 +, 소수점으로 시작/끝나는 숫자 거부)
_JSON_NUMBER = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


def _json_int(text: str, base: int = 10) -> int:
    if base != 10 or not _JSON_NUMBER.fullmatch(text):
        raise ValueError(f"JSON 숫자가 아닙니다: {text}")
    return int(text)


def _json_float(text: str) -> float:
    if not _JSON_NUMBER.fullmatch(text):
        raise ValueError(f"JSON 숫자가 아닙니다: {text}")
    return float(text)


def _reject_constant(text: str) -> Any:
    raise ValueError(f"JSON 값이 아닙니다: {text}")


class JsonMapper:
    """
    JSON 변환 헬퍼

    Attributes:
        serializers: 타입별 추가 직렬화 함수 (MRO 순서로 조회)

    Example:
        >>> mapper = JsonMapper()
        >>> mapper.stringify({"name": "World"})
        '{"name":"World"}'
        >>> mapper.parse("{a: 'b'}")
        {'a': 'b'}
    """

    def __init__(self):
        self.serializers: Dict[type, Serializer] = {}
        self._adapters: Dict[Any, TypeAdapter] = {}

    def add_serializer(self, value_type: type, serializer: Serializer) -> None:
        """
        추가 직렬화 함수 등록

        Args:
            value_type: 대상 타입 (하위 타입에도 적용)
            serializer: 값을 JSON 표현 가능한 값으로 바꾸는 함수
        """
        self.serializers[value_type] = serializer
        logger.debug("Serializer registered", value_type=value_type.__name__)

    def _fallback(self, value: Any) -> Any:
        for klass in type(value).__mro__:
            serializer = self.serializers.get(klass)
            if serializer is not None:
                return serializer(value)

        if isinstance(value, Scope):
            return value.unwrap()
        if isinstance(value, Mapping):
            return dict(value)
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return list(value)
        if hasattr(value, "__dict__"):
            return {
                key: attr for key, attr in vars(value).items()
                if not key.startswith("_")
            }

        raise TypeError(f"{type(value).__name__} 타입은 JSON으로 변환할 수 없습니다")

    def to_json(self, value: Any) -> Any:
        """
        객체 그래프를 JSON 트리(dict/list/스칼라)로 변환

        Args:
            value: 변환할 값 (None이면 빈 객체)

        Returns:
            JSON 트리

        Raises:
            ParseError: 변환할 수 없는 타입이 포함된 경우
        """
        if value is None:
            return self.new_object()

        try:
            return to_jsonable_python(value, fallback=self._fallback)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise handle_error(ErrorCode.JSON_MAPPING_FAILED, original_error=e)

    def from_json(self, tree_or_text: Any, target: Any) -> Any:
        """
        JSON 트리 또는 텍스트를 대상 타입 값으로 매핑

        Args:
            tree_or_text: JSON 트리 또는 JSON 텍스트
            target: 대상 타입 (pydantic 모델, dataclass, 타입 힌트, 일반 클래스)

        Returns:
            매핑된 값

        Raises:
            ParseError: 파싱 또는 매핑 실패 시 (텍스트 입력이면 payload 포함)
        """
        payload: Optional[str] = None
        tree = tree_or_text
        if isinstance(tree_or_text, str):
            payload = tree_or_text
            tree = self.parse(tree_or_text)

        context = {"payload": payload} if payload is not None else {}

        try:
            adapter = self._adapter_for(target)
        except PydanticSchemaGenerationError:
            adapter = None

        try:
            if adapter is None:
                return self._populate(target, tree)
            return adapter.validate_python(tree)
        except (ValidationError, TypeError, ValueError) as e:
            raise handle_error(ErrorCode.JSON_MAPPING_FAILED, original_error=e, **context)

    def _adapter_for(self, target: Any) -> TypeAdapter:
        try:
            adapter = self._adapters.get(target)
        except TypeError:  # unhashable 타입 힌트
            return TypeAdapter(target)

        if adapter is None:
            adapter = TypeAdapter(target)
            self._adapters[target] = adapter
        return adapter

    @staticmethod
    def _populate(target: Type[Any], tree: Any) -> Any:
        """스키마가 없는 일반 클래스: 기본 생성자 + 속성 설정"""
        if not isinstance(tree, Mapping):
            raise TypeError(f"{target.__name__}에는 JSON 객체만 매핑할 수 있습니다")

        instance = target()
        for key, value in tree.items():
            setattr(instance, key, value)
        return instance

    def parse(self, text: Optional[str]) -> Any:
        """
        JSON 텍스트 파싱

        표준 JSON을 먼저 시도하고, 실패하면 객체/배열 텍스트에 한해
        작은따옴표 문자열과 따옴표 없는 키를 허용하는 JSON5 파서를 사용합니다.
        숫자는 JSON 문법만 허용하며 NaN/Infinity는 거부합니다.

        Args:
            text: JSON 텍스트 (None/빈 문자열이면 빈 객체)

        Returns:
            JSON 트리

        Raises:
            ParseError: 파싱 실패 시 ("can't parse string [...]")
        """
        if text is None or not text.strip():
            return self.new_object()

        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            strict_error = e

        stripped = text.strip()
        if stripped[0] in "{[":
            try:
                tree = json5.loads(
                    stripped,
                    parse_int=_json_int,
                    parse_float=_json_float,
                    parse_constant=_reject_constant,
                )
            except ValueError as e:
                raise handle_error(ErrorCode.JSON_PARSE_FAILED, original_error=e, payload=text)
            if isinstance(tree, (dict, list)):
                return tree

        raise handle_error(ErrorCode.JSON_PARSE_FAILED, original_error=strict_error, payload=text)

    def stringify(self, value: Any) -> str:
        """
        값을 압축된 JSON 텍스트로 직렬화 (비 ASCII 문자 유지)

        Args:
            value: 직렬화할 값 (None이면 "{}")

        Returns:
            JSON 텍스트

        Raises:
            ParseError: 변환할 수 없는 타입이 포함된 경우
        """
        if value is None:
            return "{}"

        tree = self.to_json(value)
        try:
            return json.dumps(tree, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise handle_error(ErrorCode.JSON_MAPPING_FAILED, original_error=e)

    def is_valid(self, text: Optional[str]) -> bool:
        """
        JSON 텍스트 유효성 검사 (관대한 문법 포함)

        Returns:
            파싱 가능하면 True (빈 텍스트는 False)
        """
        if text is None or not text.strip():
            return False

        try:
            self.parse(text)
        except MustacheWebError:
            return False
        return True

    @staticmethod
    def new_object() -> Dict[str, Any]:
        """빈 JSON 객체"""
        return {}


# 기본 인스턴스와 모듈 수준 함수
default_mapper = JsonMapper()

to_json = default_mapper.to_json
from_json = default_mapper.from_json
parse = default_mapper.parse
stringify = default_mapper.stringify
is_valid = default_mapper.is_valid
new_object = default_mapper.new_object
add_serializer = default_mapper.add_serializer
