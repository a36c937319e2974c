"""Account domain - products shared across pattern examples."""

from .models import (
    Account,
    CorporateAccount,
    CreditBankCorporateAccount,
    CreditBankIndividualAccount,
    DanskeBankCorporateAccount,
    DanskeBankIndividualAccount,
    IndividualAccount,
)
from .value_objects import AccountKind, BankVendor

__all__ = [
    # Value Objects
    "BankVendor",
    "AccountKind",
    # Abstractions
    "Account",
    "CorporateAccount",
    "IndividualAccount",
    # Products
    "DanskeBankCorporateAccount",
    "DanskeBankIndividualAccount",
    "CreditBankCorporateAccount",
    "CreditBankIndividualAccount",
]
