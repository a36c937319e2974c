"""
Prototype pattern.

A configured account acts as a prototype: ``clone`` copies it field by
field and the copy is then assigned to a customer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

EMPTY_ACCOUNT_NUMBER = str(uuid.UUID(int=0))


class CorporateAccount(BaseModel, ABC):
    """Corporate account that can clone itself."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
    )

    name: str
    number: str = EMPTY_ACCOUNT_NUMBER

    def assign_customer(self, customer_name: str) -> None:
        """
        Assign the account to a customer.

        Only a fresh account number is generated; ``customer_name`` is
        accepted but not stored.
        """
        self.number = str(uuid.uuid4())

    @abstractmethod
    def clone(self) -> "CorporateAccount":
        """Return a shallow field-by-field copy of this account."""


class DanskeBankCorporateAccount(CorporateAccount):

    def clone(self) -> "DanskeBankCorporateAccount":
        return DanskeBankCorporateAccount(name=self.name, number=self.number)


class CreditBankCorporateAccount(CorporateAccount):

    def clone(self) -> "CreditBankCorporateAccount":
        return CreditBankCorporateAccount(name=self.name, number=self.number)


def main() -> Dict[str, Any]:
    """Clone each vendor's prototype and assign the clone to a customer."""
    results = {}
    for prototype in (
        DanskeBankCorporateAccount(name="Danske Bank Corporate Account"),
        CreditBankCorporateAccount(name="Credit Bank Corporate Account"),
    ):
        account = prototype.clone()
        account.assign_customer("ACME CO.")
        results[type(prototype).__name__] = {
            "prototype": prototype.model_dump(),
            "clone": account.model_dump(),
        }
    return results
