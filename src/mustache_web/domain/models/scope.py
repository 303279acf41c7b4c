"""
스코프 도메인 모델

템플릿 엔진에 호스트 컬렉션을 복사 없이 노출하기 위한 래퍼입니다.

Scope: 렌더링 가능한 스코프 마커 (get / iterate)
ScopedList: 순서 있는 시퀀스 래퍼
ScopedMap: 키-값 매핑 래퍼
ScopedObject: 임의 객체(레코드) 래퍼
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Dict, Iterator, List, Optional


_MISSING = object()


class Scope(ABC):
    """
    렌더링 가능한 스코프 마커

    엔진은 이름 조회(get)와 반복(iterate)만으로 스코프를 해석합니다.
    래퍼는 내부 컨테이너를 소유하지만 복사하거나 동결하지 않습니다.
    """

    @abstractmethod
    def get(self, key: Any, default: Any = None) -> Any:
        """이름(또는 인덱스)으로 값 조회"""

    @abstractmethod
    def iterate(self) -> Iterator[Any]:
        """섹션 렌더링에 사용할 값 순회"""

    @abstractmethod
    def unwrap(self) -> Any:
        """감싸고 있는 원본 값 반환"""


class ScopedList(MutableSequence, Scope):
    """
    순서 있는 시퀀스 스코프

    모든 연산(크기, 포함 여부, 순회, 삽입, 삭제, 조회)을
    내부 리스트에 그대로 위임합니다.
    """

    def __init__(self, items: Optional[List[Any]] = None):
        """
        Args:
            items: 감쌀 리스트 (None이면 새 리스트, 복사하지 않음)
        """
        self._items = items if items is not None else []

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def insert(self, index: int, value: Any) -> None:
        self._items.insert(index, value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ScopedList):
            other = other.unwrap()
        return self._items == other

    def __repr__(self) -> str:
        return f"ScopedList({self._items!r})"

    def __str__(self) -> str:
        return str(self._items)

    def get(self, key: Any, default: Any = None) -> Any:
        """
        인덱스로 값 조회

        Args:
            key: 정수 인덱스 또는 숫자 문자열 (예: "0")
            default: 범위를 벗어나거나 인덱스가 아닐 때 반환할 값
        """
        if isinstance(key, str):
            if not key.lstrip("-").isdigit():
                return default
            key = int(key)
        if not isinstance(key, int):
            return default
        try:
            return self._items[key]
        except IndexError:
            return default

    def iterate(self) -> Iterator[Any]:
        return iter(self._items)

    def unwrap(self) -> List[Any]:
        return self._items


class ScopedMap(MutableMapping, Scope):
    """
    키-값 매핑 스코프

    모든 연산을 내부 딕셔너리에 그대로 위임합니다.
    """

    def __init__(self, data: Optional[Dict[Any, Any]] = None):
        """
        Args:
            data: 감쌀 딕셔너리 (None이면 새 딕셔너리, 복사하지 않음)
        """
        self._data = data if data is not None else {}

    def __getitem__(self, key):
        return self._data[key]

    def __setitem__(self, key, value) -> None:
        self._data[key] = value

    def __delitem__(self, key) -> None:
        del self._data[key]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ScopedMap):
            other = other.unwrap()
        return self._data == other

    def __repr__(self) -> str:
        return f"ScopedMap({self._data!r})"

    def __str__(self) -> str:
        return str(self._data)

    def get(self, key: Any, default: Any = None) -> Any:
        return self._data.get(key, default)

    def iterate(self) -> Iterator[Any]:
        return iter(self._data.values())

    def unwrap(self) -> Dict[Any, Any]:
        return self._data


class ScopedObject(Scope):
    """
    임의 객체(레코드) 스코프

    이름 조회는 속성 접근으로, 인자 없는 메서드는 호출 결과로 해석합니다.
    """

    def __init__(self, target: Any):
        """
        Args:
            target: 감쌀 객체
        """
        self._target = target

    def get(self, key: Any, default: Any = None) -> Any:
        if not isinstance(key, str) or key.startswith("_"):
            return default
        value = getattr(self._target, key, _MISSING)
        if value is _MISSING:
            return default
        if callable(value):
            return value()
        return value

    def iterate(self) -> Iterator[Any]:
        if isinstance(self._target, Iterable) and not isinstance(self._target, (str, bytes)):
            return iter(self._target)
        return iter((self._target,))

    def unwrap(self) -> Any:
        return self._target

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ScopedObject):
            other = other.unwrap()
        return self._target == other

    def __repr__(self) -> str:
        return f"ScopedObject({self._target!r})"

    def __str__(self) -> str:
        return str(self._target)


def new_scoped_map(data: Optional[Dict[Any, Any]] = None) -> ScopedMap:
    """
    매핑 스코프 생성

    Args:
        data: 감쌀 딕셔너리 (선택)

    Returns:
        ScopedMap 객체
    """
    return ScopedMap(data)


def new_scoped_list(items: Optional[List[Any]] = None) -> ScopedList:
    """
    시퀀스 스코프 생성

    Args:
        items: 감쌀 리스트 (선택)

    Returns:
        ScopedList 객체
    """
    return ScopedList(items)


def as_scope(value: Any) -> Scope:
    """
    임의의 값을 스코프로 표시

    Mapping → ScopedMap, 문자열이 아닌 시퀀스 → ScopedList,
    그 외 → ScopedObject. 이미 스코프인 값은 그대로 반환합니다.
    dict/list가 아닌 컨테이너는 한 번 얕게 복사됩니다.

    Args:
        value: 스코프로 사용할 값

    Returns:
        Scope 객체
    """
    if isinstance(value, Scope):
        return value
    if isinstance(value, Mapping):
        return ScopedMap(value if isinstance(value, dict) else dict(value))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ScopedList(value if isinstance(value, list) else list(value))
    return ScopedObject(value)
