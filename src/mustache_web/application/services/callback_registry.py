"""
AJAX 콜백 레지스트리

지연 로딩 패널이 등록한 콜백(토큰 → 스크립트 생성 함수)을 보관합니다.
LRU 정책으로 크기를 제한하며, 동기 엔드포인트가 스레드 풀에서 실행될 수
있으므로 RLock으로 보호합니다.
"""

import secrets
import threading
from collections import OrderedDict
from typing import Callable, Dict

from mustache_web.infrastructure.logging import get_logger

logger = get_logger(__name__, component="CallbackRegistry")

CallbackHandler = Callable[[], str]


class CallbackRegistry:
    """
    LRU 기반 콜백 레지스트리

    Attributes:
        max_entries: 최대 콜백 수 (초과 시 가장 오래된 항목 제거)
    """

    def __init__(self, max_entries: int = 256):
        """
        Args:
            max_entries: 최대 콜백 수 (기본: 256)
        """
        if max_entries < 1:
            raise ValueError("max_entries는 1 이상이어야 합니다")

        self.max_entries = max_entries

        # LRU 캐시 (OrderedDict 사용)
        self._handlers: "OrderedDict[str, CallbackHandler]" = OrderedDict()

        # 스레드 세이프를 위한 락
        self._lock = threading.RLock()

        self._stats = {
            "registrations": 0,
            "invocations": 0,
            "evictions": 0,
        }

    def register(self, handler: CallbackHandler) -> str:
        """
        콜백 등록

        Args:
            handler: 호출 시 JavaScript 응답을 반환하는 함수

        Returns:
            콜백 토큰
        """
        token = secrets.token_urlsafe(12)

        with self._lock:
            if len(self._handlers) >= self.max_entries:
                evicted, _ = self._handlers.popitem(last=False)
                self._stats["evictions"] += 1
                logger.debug("Callback evicted (LRU)", token=evicted)

            self._handlers[token] = handler
            self._stats["registrations"] += 1

        logger.debug("Callback registered", token=token)
        return token

    def invoke(self, token: str) -> str:
        """
        콜백 실행

        Args:
            token: 등록 시 받은 토큰

        Returns:
            핸들러가 생성한 응답

        Raises:
            KeyError: 알 수 없는 토큰
        """
        with self._lock:
            handler = self._handlers.get(token)
            if handler is None:
                raise KeyError(token)
            self._handlers.move_to_end(token)  # LRU: 최근 사용으로 이동
            self._stats["invocations"] += 1

        return handler()

    def unregister(self, token: str) -> bool:
        """
        콜백 제거

        Returns:
            제거 여부
        """
        with self._lock:
            return self._handlers.pop(token, None) is not None

    @staticmethod
    def url_for(token: str, prefix: str) -> str:
        """
        콜백 URL 생성

        Args:
            token: 콜백 토큰
            prefix: 콜백 경로 (예: "/_mustache/callback")

        Returns:
            콜백 URL
        """
        return f"{prefix.rstrip('/')}/{token}"

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._handlers

    def get_stats(self) -> Dict[str, int]:
        """
        레지스트리 통계 조회

        Returns:
            통계 딕셔너리 (size 포함)
        """
        with self._lock:
            return {**self._stats, "size": len(self._handlers)}
