"""Tests for the singleton registry and accessor."""
import threading
import time

from account_patterns.infrastructure.patterns import SingletonRegistry, get_singleton


class Counter:
    instances = 0

    def __init__(self, start: int = 0):
        Counter.instances += 1
        self.value = start


class SlowService:
    constructed = 0

    def __init__(self):
        SlowService.constructed += 1
        time.sleep(0.05)


class TestSingletonRegistry:
    """Test registry behavior."""

    def setup_method(self):
        Counter.instances = 0
        SlowService.constructed = 0

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_singleton_returns_same_instance(self):
        first = get_singleton(Counter)
        second = get_singleton(Counter)

        assert first is second
        assert Counter.instances == 1

    def test_constructor_arguments_only_used_on_creation(self):
        first = get_singleton(Counter, start=5)
        second = get_singleton(Counter, start=99)

        assert second is first
        assert second.value == 5

    def test_register_preexisting_instance(self):
        registry = SingletonRegistry.get_instance()
        counter = Counter(start=42)

        registry.register(Counter, counter)

        assert registry.has(Counter)
        assert get_singleton(Counter) is counter

    def test_clear_drops_instances(self):
        first = get_singleton(Counter)
        SingletonRegistry.get_instance().clear()

        assert not SingletonRegistry.get_instance().has(Counter)
        assert get_singleton(Counter) is not first

    def test_concurrent_access_constructs_once(self):
        thread_count = 8
        barrier = threading.Barrier(thread_count)
        results = []

        def worker():
            barrier.wait()
            results.append(get_singleton(SlowService))

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert SlowService.constructed == 1
        assert len(results) == thread_count
        assert all(result is results[0] for result in results)
