"""
Abstract Factory pattern.

A factory creates a whole family of related accounts. Swapping the concrete
factory swaps every product it creates at once.
"""
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict

from account_patterns.domain.account import (
    BankVendor,
    CorporateAccount,
    CreditBankCorporateAccount,
    CreditBankIndividualAccount,
    DanskeBankCorporateAccount,
    DanskeBankIndividualAccount,
    IndividualAccount,
)


class BaseAccountFactory(ABC):
    """Creates corporate and individual accounts of one vendor family."""

    vendor: ClassVar[BankVendor]

    @abstractmethod
    def create_corporate_account(self) -> CorporateAccount:
        pass

    @abstractmethod
    def create_individual_account(self) -> IndividualAccount:
        pass


class DanskeBankAccountFactory(BaseAccountFactory):
    vendor: ClassVar[BankVendor] = BankVendor.DANSKE_BANK

    def create_corporate_account(self) -> CorporateAccount:
        return DanskeBankCorporateAccount()

    def create_individual_account(self) -> IndividualAccount:
        return DanskeBankIndividualAccount()


class CreditBankAccountFactory(BaseAccountFactory):
    vendor: ClassVar[BankVendor] = BankVendor.CREDIT_BANK

    def create_corporate_account(self) -> CorporateAccount:
        return CreditBankCorporateAccount()

    def create_individual_account(self) -> IndividualAccount:
        return CreditBankIndividualAccount()


def open_accounts(factory: BaseAccountFactory) -> Dict[str, str]:
    """Create one account of each kind using only the abstract factory."""
    corporate_account = factory.create_corporate_account()
    individual_account = factory.create_individual_account()
    return {
        "corporate": type(corporate_account).__name__,
        "individual": type(individual_account).__name__,
    }


def main() -> Dict[str, Any]:
    """Open a corporate and an individual account with each vendor factory."""
    factories = [DanskeBankAccountFactory(), CreditBankAccountFactory()]
    return {factory.vendor.value: open_accounts(factory) for factory in factories}
