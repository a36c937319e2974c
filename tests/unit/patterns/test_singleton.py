"""Tests for the Singleton pattern."""
import threading
import time
import uuid
from unittest.mock import patch

import pytest

from account_patterns.creational import singleton
from account_patterns.creational.singleton import Repository


class TestRepositorySingleton:
    """Test lazy creation and identity of the repository."""

    def test_instance_is_created_lazily(self):
        assert Repository._instance is None

        repository = Repository.instance()

        assert Repository._instance is repository

    def test_repeated_calls_return_same_instance(self):
        first = Repository.instance()

        for _ in range(10):
            assert Repository.instance() is first

    def test_guid_is_fixed_for_instance_lifetime(self):
        guid = Repository.instance().guid

        assert isinstance(guid, uuid.UUID)
        assert Repository.instance().guid == guid

    def test_reset_instance_allows_new_instance(self):
        first = Repository.instance()
        Repository.reset_instance()

        assert Repository.instance() is not first

    def test_concurrent_first_access_constructs_once(self):
        thread_count = 16
        barrier = threading.Barrier(thread_count)
        results = []
        results_lock = threading.Lock()
        real_uuid4 = uuid.uuid4
        construction_calls = []

        def slow_uuid4():
            construction_calls.append(1)
            # Widen the window in which other threads could race past the first check
            time.sleep(0.05)
            return real_uuid4()

        def worker():
            barrier.wait()
            repository = Repository.instance()
            with results_lock:
                results.append(repository)

        with patch.object(singleton.uuid, "uuid4", side_effect=slow_uuid4):
            threads = [threading.Thread(target=worker) for _ in range(thread_count)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join(timeout=10)

        assert len(construction_calls) == 1
        assert len(results) == thread_count
        assert all(repository is results[0] for repository in results)

    def test_direct_construction_is_rejected(self):
        with pytest.raises(TypeError, match="Repository.instance"):
            Repository(uuid.uuid4())

        assert Repository._instance is None

    def test_demo_reports_single_guid(self):
        result = singleton.main()

        assert result["calls"] == 10
        assert len(result["guids"]) == 1
