"""
Mediator pattern.

The mediator routes a request to the single handler registered for the
request's type. Requests without a registered handler are ignored: ``send``
returns ``None`` and nothing is invoked.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from account_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """Marker base for requests sent through the mediator."""


class CommandHandler(ABC):
    """Handler for one request type."""

    @abstractmethod
    def handle(self, command: Command) -> Any:
        """Handle the given request."""


THandler = TypeVar('THandler', bound=CommandHandler)

# Request type -> handler class
_handler_registry: Dict[Type[Command], Type[CommandHandler]] = {}


def handles(command_type: Type[Command]):
    """
    Register the decorated handler class for ``command_type``.

    Usage:
        @handles(CreateAccountCommand)
        class CreateAccountCommandHandler(CommandHandler):
            ...
    """
    def decorator(handler_class: Type[THandler]) -> Type[THandler]:
        _handler_registry[command_type] = handler_class
        handler_class._command_type = command_type
        return handler_class

    return decorator


def get_registered_handlers() -> Dict[Type[Command], Type[CommandHandler]]:
    """Get all registered handlers."""
    return _handler_registry.copy()


class CreateAccountCommand(Command):
    pass


class CreateCustomerCommand(Command):
    pass


@handles(CreateAccountCommand)
class CreateAccountCommandHandler(CommandHandler):

    def handle(self, command: Command) -> str:
        name = type(self).__name__
        logger.info(name, command=type(command).__name__)
        return name


@handles(CreateCustomerCommand)
class CreateCustomerCommandHandler(CommandHandler):

    def handle(self, command: Command) -> str:
        name = type(self).__name__
        logger.info(name, command=type(command).__name__)
        return name


class Mediator:
    """Routes each request to the handler registered for its type or nearest base."""

    def __init__(self, handlers: Optional[Mapping[Type[Command], Type[CommandHandler]]] = None):
        self._handlers = dict(handlers) if handlers is not None else get_registered_handlers()

    def send(self, command: Command) -> Optional[Any]:
        """
        Dispatch ``command`` to its handler.

        A fresh handler is created for every request. Returns the handler's
        result, or ``None`` when no handler is registered for the type or
        any of its bases.
        """
        handler_class = self._find_handler(type(command))
        if handler_class is None:
            logger.debug("No handler registered, request ignored", command=type(command).__name__)
            return None

        return handler_class().handle(command)

    def _find_handler(self, command_type: Type[Command]) -> Optional[Type[CommandHandler]]:
        for klass in command_type.__mro__:
            if klass in self._handlers:
                return self._handlers[klass]
        return None


def main() -> Dict[str, Any]:
    """Send one account and one customer request through the mediator."""
    mediator = Mediator()
    return {
        "handled_by": [
            mediator.send(CreateAccountCommand()),
            mediator.send(CreateCustomerCommand()),
        ]
    }
