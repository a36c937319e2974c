"""Registry holding one shared instance per class."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from account_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Process-wide registry of singleton instances keyed by class.

    The registry is itself a lazily created singleton. Instance creation is
    guarded so that concurrent first access constructs each class once.
    """

    _instance: Optional['SingletonRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize the registry."""
        self._instances: Dict[Type, Any] = {}
        self._instance_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> 'SingletonRegistry':
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first use.

        Constructor arguments are only used when the instance is created.
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instance_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
                    self._logger.debug("Created singleton", singleton=singleton_class.__name__)
        return cast(T, instance)

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register a pre-created instance for ``singleton_class``."""
        with self._instance_lock:
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance exists for ``singleton_class``."""
        return singleton_class in self._instances

    def clear(self) -> None:
        """Drop all instances. Intended for test isolation."""
        with self._instance_lock:
            self._instances.clear()
