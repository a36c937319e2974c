"""
Singleton pattern.

``Repository.instance()`` lazily creates the one process-wide repository.
Creation uses double-checked locking so concurrent first callers share a
single instance.
"""
import threading
import uuid
from typing import Any, Dict, Optional

from account_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_CREATION_TOKEN = object()


class Repository:
    """Process-wide repository; obtain it through ``instance()``."""

    _instance: Optional['Repository'] = None
    _lock = threading.Lock()

    def __init__(self, guid: uuid.UUID, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise TypeError("Repository is created through Repository.instance()")
        self._guid = guid

    @property
    def guid(self) -> uuid.UUID:
        return self._guid

    @classmethod
    def instance(cls) -> 'Repository':
        """Get the singleton repository, creating it on first call."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(uuid.uuid4(), _CREATION_TOKEN)
                    logger.debug("Repository created", guid=str(cls._instance.guid))
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current instance. Intended for test isolation."""
        with cls._lock:
            cls._instance = None


def main() -> Dict[str, Any]:
    """Fetch the repository repeatedly and report the identifiers seen."""
    guids = []
    repository = Repository.instance()
    for _ in range(10):
        guids.append(str(repository.guid))
        repository = Repository.instance()
    return {"guids": sorted(set(guids)), "calls": len(guids)}
