"""Pattern catalog - registry of demonstration entry points.

Each pattern module exposes a ``main()`` demonstration that returns a
JSON-serializable summary of what it observed. The catalog maps pattern
names to those entry points so the CLI never imports pattern modules
directly.
"""
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from account_patterns.behavioral import command, mediator
from account_patterns.creational import abstract_factory, builder, factory_method, prototype, singleton
from account_patterns.domain.base.exceptions import PatternNotFoundError
from account_patterns.infrastructure.logging.logger import get_logger
from account_patterns.structural import adapter, bridge, decorator

DemoFunction = Callable[[], Dict[str, Any]]


class PatternCategory(str, Enum):
    """Pattern category enumeration."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class PatternRegistration:
    """Container for pattern registration information."""

    def __init__(self, name: str, category: PatternCategory, description: str, demo: DemoFunction):
        self.name = name
        self.category = category
        self.description = description
        self.demo = demo

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
        }


class PatternCatalog:
    """
    Registry of pattern demonstrations.

    Thread-safe singleton implementation. New patterns are added by
    registering their demo function, without modifying the CLI.
    """

    _instance: Optional['PatternCatalog'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize pattern catalog."""
        self._registrations: Dict[str, PatternRegistration] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> 'PatternCatalog':
        """Get singleton instance of the catalog, populated with the built-in patterns."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    catalog = cls()
                    register_builtin_patterns(catalog)
                    cls._instance = catalog
        return cls._instance

    def register(self, name: str, category: PatternCategory, description: str, demo: DemoFunction) -> None:
        """
        Register a pattern demonstration.

        Raises:
            ValueError: If the name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ValueError(f"Pattern '{name}' is already registered")
            self._registrations[name] = PatternRegistration(name, category, description, demo)
            self._logger.debug("Registered pattern", pattern=name, category=category.value)

    def get(self, name: str) -> PatternRegistration:
        """Get a registration by name, raising PatternNotFoundError if unknown."""
        registration = self._registrations.get(name)
        if registration is None:
            raise PatternNotFoundError(name, self.get_registered_names())
        return registration

    def get_registered_names(self) -> List[str]:
        return list(self._registrations)

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternRegistration]:
        """List registrations, optionally filtered by category."""
        return [
            registration
            for registration in self._registrations.values()
            if category is None or registration.category == category
        ]

    def run(self, name: str) -> Dict[str, Any]:
        """Run the demonstration registered under ``name``."""
        registration = self.get(name)
        self._logger.info("Running pattern demo", pattern=name)
        return registration.demo()


def register_builtin_patterns(catalog: PatternCatalog) -> None:
    """Register every pattern shipped with the package."""
    catalog.register(
        "command", PatternCategory.BEHAVIORAL,
        "Command bound to its handler, triggered by an invoker", command.main,
    )
    catalog.register(
        "mediator", PatternCategory.BEHAVIORAL,
        "Mediator routing requests to the handler registered for their type", mediator.main,
    )
    catalog.register(
        "abstract-factory", PatternCategory.CREATIONAL,
        "Factory creating a consistent family of accounts", abstract_factory.main,
    )
    catalog.register(
        "builder", PatternCategory.CREATIONAL,
        "Banking service building accounts through an interchangeable builder", builder.main,
    )
    catalog.register(
        "factory-method", PatternCategory.CREATIONAL,
        "Creators each overriding one account creation method", factory_method.main,
    )
    catalog.register(
        "prototype", PatternCategory.CREATIONAL,
        "Accounts cloned field by field from a prototype", prototype.main,
    )
    catalog.register(
        "singleton", PatternCategory.CREATIONAL,
        "Process-wide repository created once under double-checked locking", singleton.main,
    )
    catalog.register(
        "adapter", PatternCategory.STRUCTURAL,
        "Adapters normalizing unrelated account shapes into account details", adapter.main,
    )
    catalog.register(
        "bridge", PatternCategory.STRUCTURAL,
        "Account service delegating creation to an interchangeable creator", bridge.main,
    )
    catalog.register(
        "decorator", PatternCategory.STRUCTURAL,
        "Orderable account wrapping a plain account and adding buy", decorator.main,
    )
