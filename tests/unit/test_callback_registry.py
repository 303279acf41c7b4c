"""
콜백 레지스트리 단위 테스트

mustache_web/application/services/callback_registry.py 테스트
"""

import threading

import pytest

from mustache_web.application.services import CallbackRegistry


@pytest.mark.unit
class TestCallbackRegistry:
    """CallbackRegistry 테스트"""

    def test_register_and_invoke(self):
        """등록한 콜백 실행"""
        registry = CallbackRegistry()

        token = registry.register(lambda: "alert(1)")

        assert token in registry
        assert registry.invoke(token) == "alert(1)"

    def test_unknown_token(self):
        """알 수 없는 토큰은 KeyError"""
        with pytest.raises(KeyError):
            CallbackRegistry().invoke("missing")

    def test_lru_eviction(self):
        """최대 개수를 넘으면 가장 오래 사용하지 않은 콜백 제거"""
        registry = CallbackRegistry(max_entries=2)
        first = registry.register(lambda: "1")
        second = registry.register(lambda: "2")

        registry.invoke(first)  # first를 최근 사용으로
        third = registry.register(lambda: "3")

        assert first in registry
        assert second not in registry
        assert third in registry
        assert registry.get_stats()["evictions"] == 1

    def test_unregister(self):
        registry = CallbackRegistry()
        token = registry.register(lambda: "")

        assert registry.unregister(token) is True
        assert registry.unregister(token) is False
        assert len(registry) == 0

    def test_url_for(self):
        """콜백 URL"""
        assert CallbackRegistry.url_for("abc", "/_mustache/callback/") == "/_mustache/callback/abc"

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            CallbackRegistry(max_entries=0)

    def test_concurrent_registration(self):
        """여러 스레드에서 동시에 등록"""
        registry = CallbackRegistry(max_entries=1000)

        def worker():
            for _ in range(50):
                registry.register(lambda: "")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 400
        assert registry.get_stats()["registrations"] == 400
