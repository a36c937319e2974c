"""Account Patterns - Root Package.

A catalog of classic object-oriented design patterns, each expressed over a
small banking domain with two vendor families (Danske Bank and Credit Bank).

Key Components:
    - behavioral: Command and Mediator
    - creational: Abstract Factory, Builder, Factory Method, Prototype, Singleton
    - structural: Adapter, Bridge, Decorator
    - domain: Shared account products and exceptions
    - catalog: Registry of pattern demonstrations used by the CLI
    - config / infrastructure: Configuration, logging and instance management
"""

from ._version import __version__

__author__ = "Account Patterns Contributors"
__package_name__ = "account-patterns"

"""
Usage:
    The catalog is typically explored through the command-line interface:

    >>> account-patterns list
    >>> account-patterns run prototype --format yaml
"""
