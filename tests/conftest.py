import os

import pytest

from account_patterns.creational.singleton import Repository
from account_patterns.infrastructure.patterns import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Start every test without cached singleton instances."""
    Repository.reset_instance()
    SingletonRegistry.get_instance().clear()
    yield
    Repository.reset_instance()
    SingletonRegistry.get_instance().clear()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove ACCOUNT_PATTERNS_* overrides inherited from the shell."""
    for name in list(os.environ):
        if name.startswith("ACCOUNT_PATTERNS_"):
            monkeypatch.delenv(name, raising=False)
