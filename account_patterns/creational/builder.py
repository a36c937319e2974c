"""
Builder pattern.

The banking service accepts any account builder and forwards account
creation to it, so the service never names a concrete account type.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict

from account_patterns.domain.account import (
    CorporateAccount,
    CreditBankCorporateAccount,
    CreditBankIndividualAccount,
    DanskeBankCorporateAccount,
    DanskeBankIndividualAccount,
    IndividualAccount,
)


class BaseAccountBuilder(ABC):

    @abstractmethod
    def build_corporate_account(self) -> CorporateAccount:
        pass

    @abstractmethod
    def build_individual_account(self) -> IndividualAccount:
        pass


class DanskeBankAccountBuilder(BaseAccountBuilder):

    def build_corporate_account(self) -> CorporateAccount:
        return DanskeBankCorporateAccount()

    def build_individual_account(self) -> IndividualAccount:
        return DanskeBankIndividualAccount()


class CreditBankAccountBuilder(BaseAccountBuilder):

    def build_corporate_account(self) -> CorporateAccount:
        return CreditBankCorporateAccount()

    def build_individual_account(self) -> IndividualAccount:
        return CreditBankIndividualAccount()


class BankingService:
    """Creates accounts through whichever builder it is given."""

    def create_corporate_account(self, builder: BaseAccountBuilder) -> CorporateAccount:
        return builder.build_corporate_account()

    def create_individual_account(self, builder: BaseAccountBuilder) -> IndividualAccount:
        return builder.build_individual_account()


def main() -> Dict[str, Any]:
    """Build a Danske Bank individual account and a Credit Bank corporate account."""
    service = BankingService()
    individual_account = service.create_individual_account(DanskeBankAccountBuilder())
    corporate_account = service.create_corporate_account(CreditBankAccountBuilder())
    return {
        "individual": type(individual_account).__name__,
        "corporate": type(corporate_account).__name__,
    }
