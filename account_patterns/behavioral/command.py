"""
Command pattern.

A command is bound to the handler that executes it when it is created. The
invoker only knows the abstract command and triggers it through
``execute_command``.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from account_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class CommandHandler(ABC):
    """Handler capable of executing a command."""

    @abstractmethod
    def handle(self, command: "Command") -> Any:
        """Handle the given command."""


class Command(ABC):
    """Command bound to exactly one handler."""

    def __init__(self, handler: CommandHandler):
        self._handler = handler

    @property
    def handler(self) -> CommandHandler:
        return self._handler

    @abstractmethod
    def execute(self) -> Any:
        """Execute the command through its handler."""


class CreateAccountCommand(Command):

    def __init__(self, handler: "CreateAccountCommandHandler"):
        super().__init__(handler)

    def execute(self) -> Any:
        return self.handler.handle(self)


class CreateAccountCommandHandler(CommandHandler):

    def handle(self, command: Command) -> None:
        # Business logic
        logger.debug("Handling command", command=type(command).__name__)


class Invoker:
    """Triggers a command without knowing its concrete type."""

    def __init__(self, command: Command):
        self._command = command

    def execute_command(self) -> Any:
        return self._command.execute()


def main() -> Dict[str, Any]:
    """Bind a create-account command to its handler and run it through an invoker."""
    command = CreateAccountCommand(CreateAccountCommandHandler())
    invoker = Invoker(command)
    invoker.execute_command()
    return {
        "command": type(command).__name__,
        "handler": type(command.handler).__name__,
        "executed": True,
    }
