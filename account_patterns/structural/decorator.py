"""
Decorator pattern.

Attaches additional responsibilities to an object dynamically. An orderable
account is still an individual account, wraps exactly one other individual
account and adds ``buy``.
"""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List

from account_patterns.domain.account import (
    BankVendor,
    DanskeBankIndividualAccount,
    IndividualAccount,
)
from account_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


# Abstract decorator
class OrderableAccount(IndividualAccount, ABC):

    account: IndividualAccount

    def describe(self) -> str:
        return self.account.describe()

    def buy(self) -> List[str]:
        """
        Buy the account.

        Wrapped orderable accounts buy first. Returns the purchase messages
        emitted along the chain, innermost first.
        """
        messages = self.account.buy() if isinstance(self.account, OrderableAccount) else []
        messages.append(self.log())
        return messages

    @abstractmethod
    def log(self) -> str:
        """Record the purchase and return the logged message."""


# Concrete decorators
class DanskeBankOrderableAccount(OrderableAccount):
    vendor: ClassVar[BankVendor] = BankVendor.DANSKE_BANK

    def log(self) -> str:
        message = "Someone is buying Danske Bank account"
        logger.info(message, account=type(self.account).__name__)
        return message


class CreditBankOrderableAccount(OrderableAccount):
    vendor: ClassVar[BankVendor] = BankVendor.CREDIT_BANK

    def log(self) -> str:
        message = "Someone is buying Credit Bank account"
        logger.info(message, account=type(self.account).__name__)
        return message


def main() -> Dict[str, Any]:
    """Wrap a plain account in an orderable decorator and buy it."""
    account = DanskeBankIndividualAccount()
    orderable_account = DanskeBankOrderableAccount(account=account)
    return {
        "account": account.describe(),
        "purchases": orderable_account.buy(),
    }
