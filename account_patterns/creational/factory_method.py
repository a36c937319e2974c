"""
Factory Method pattern.

Each creator overrides a single creation method and produces the one
individual account variant it is specialized for.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from account_patterns.domain.account import (
    CreditBankIndividualAccount,
    DanskeBankIndividualAccount,
    IndividualAccount,
)
from account_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class IndividualAccountFactory(ABC):

    @abstractmethod
    def build_individual_account(self) -> IndividualAccount:
        """Create the individual account this creator is specialized for."""


class DanskeBankAccountFactory(IndividualAccountFactory):

    def build_individual_account(self) -> IndividualAccount:
        return DanskeBankIndividualAccount()


class CreditBankAccountFactory(IndividualAccountFactory):

    def build_individual_account(self) -> IndividualAccount:
        return CreditBankIndividualAccount()


def build_accounts(factories: Iterable[IndividualAccountFactory]) -> List[IndividualAccount]:
    """Build one account per creator, in order."""
    accounts = []
    for factory in factories:
        account = factory.build_individual_account()
        logger.info(f"Created {type(account).__name__}", factory=type(factory).__name__)
        accounts.append(account)
    return accounts


def main() -> Dict[str, Any]:
    """Build an individual account with each creator."""
    accounts = build_accounts([DanskeBankAccountFactory(), CreditBankAccountFactory()])
    return {"created": [type(account).__name__ for account in accounts]}
