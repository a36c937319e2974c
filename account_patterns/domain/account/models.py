"""Account product family shared by the creational and structural examples."""
from abc import ABC
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from .value_objects import AccountKind, BankVendor


class Account(BaseModel, ABC):
    """
    Base class for all account products.

    Products carry no instance data; the concrete class is the variant tag,
    exposed through the class-level ``vendor`` and ``kind`` attributes.
    """
    model_config = ConfigDict(frozen=True)

    vendor: ClassVar[BankVendor]
    kind: ClassVar[AccountKind]

    def describe(self) -> str:
        """Short description of the account variant."""
        return f"{self.vendor.display_name} {self.kind.value} account"


class CorporateAccount(Account, ABC):
    """Abstract corporate account."""
    kind: ClassVar[AccountKind] = AccountKind.CORPORATE


class IndividualAccount(Account, ABC):
    """Abstract individual account."""
    kind: ClassVar[AccountKind] = AccountKind.INDIVIDUAL


class DanskeBankCorporateAccount(CorporateAccount):
    vendor: ClassVar[BankVendor] = BankVendor.DANSKE_BANK


class DanskeBankIndividualAccount(IndividualAccount):
    vendor: ClassVar[BankVendor] = BankVendor.DANSKE_BANK


class CreditBankCorporateAccount(CorporateAccount):
    vendor: ClassVar[BankVendor] = BankVendor.CREDIT_BANK


class CreditBankIndividualAccount(IndividualAccount):
    vendor: ClassVar[BankVendor] = BankVendor.CREDIT_BANK
