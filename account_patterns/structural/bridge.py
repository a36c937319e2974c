"""
Bridge pattern.

Decouples an abstraction from its implementation so that the two can vary
independently.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from account_patterns.domain.account import (
    CreditBankIndividualAccount,
    DanskeBankIndividualAccount,
    IndividualAccount,
)


# Implementor
class BaseAccountCreator(ABC):

    @abstractmethod
    def create_account(self) -> IndividualAccount:
        pass


# Abstraction
class BaseAccountService(ABC):

    def __init__(self, implementor: BaseAccountCreator):
        self._implementor = implementor

    @property
    def implementor(self) -> BaseAccountCreator:
        return self._implementor

    def create_account(self) -> IndividualAccount:
        return self._implementor.create_account()


# Refined abstraction
class AccountService(BaseAccountService):
    pass


class DanskeBankAccountCreator(BaseAccountCreator):

    def create_account(self) -> IndividualAccount:
        return DanskeBankIndividualAccount()


class CreditBankAccountCreator(BaseAccountCreator):

    def create_account(self) -> IndividualAccount:
        return CreditBankIndividualAccount()


def main() -> Dict[str, Any]:
    """Create an account through the same service with two different creators."""
    created = []
    for creator in (DanskeBankAccountCreator(), CreditBankAccountCreator()):
        account = AccountService(creator).create_account()
        created.append(type(account).__name__)
    return {"created": created}
