"""
Adapter pattern.

Two unrelated external account shapes are wrapped by adapters that expose
the same ``get_details`` operation returning normalized ``AccountDetails``.
"""
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class AccountDetails(BaseModel):
    """Normalized account details."""
    model_config = ConfigDict(frozen=True)

    name: str
    number: str

    def __str__(self) -> str:
        return f"{self.name} {self.number}"


class DanskeBankCorporateAccount(BaseModel):
    """External corporate account shape."""
    corporate_customer_name: str
    number: str


class DanskeBankIndividualAccount(BaseModel):
    """External individual account shape."""
    first_name: str
    last_name: str
    number: str = str(uuid.UUID(int=0))


class AccountDetailsProvider(ABC):
    """Capability shared by all account adapters."""

    @abstractmethod
    def get_details(self) -> AccountDetails:
        """Return normalized details of the wrapped account."""


class DanskeBankCorporateAccountAdapter(AccountDetailsProvider):

    def __init__(self, account: DanskeBankCorporateAccount):
        self._account = account

    @classmethod
    def from_fields(cls, name: str, number: str) -> "DanskeBankCorporateAccountAdapter":
        return cls(DanskeBankCorporateAccount(corporate_customer_name=name, number=number))

    @property
    def account(self) -> DanskeBankCorporateAccount:
        return self._account

    def get_details(self) -> AccountDetails:
        return AccountDetails(
            name=self._account.corporate_customer_name,
            number=self._account.number,
        )


class DanskeBankIndividualAccountAdapter(AccountDetailsProvider):

    def __init__(self, account: DanskeBankIndividualAccount):
        self._account = account

    @classmethod
    def from_fields(
        cls, first_name: str, last_name: str, number: str
    ) -> "DanskeBankIndividualAccountAdapter":
        return cls(
            DanskeBankIndividualAccount(first_name=first_name, last_name=last_name, number=number)
        )

    @property
    def account(self) -> DanskeBankIndividualAccount:
        return self._account

    def get_details(self) -> AccountDetails:
        return AccountDetails(
            name=f"{self._account.first_name} {self._account.last_name}",
            number=self._account.number,
        )


def main() -> Dict[str, Any]:
    """Normalize a corporate and an individual account through their adapters."""
    adapters = [
        DanskeBankCorporateAccountAdapter.from_fields("ACME CO", str(uuid.uuid4())),
        DanskeBankIndividualAccountAdapter.from_fields("Jan", "Dzban", str(uuid.uuid4())),
    ]
    return {"details": [str(adapter.get_details()) for adapter in adapters]}
