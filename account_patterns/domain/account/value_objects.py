"""Account value objects - closed variant tags for the product families."""
from enum import Enum


class BankVendor(str, Enum):
    """Vendor family that produced an account."""
    DANSKE_BANK = "danske_bank"
    CREDIT_BANK = "credit_bank"

    @property
    def display_name(self) -> str:
        """Human readable vendor name."""
        return _VENDOR_DISPLAY_NAMES[self]


class AccountKind(str, Enum):
    """Kind of account within a vendor family."""
    CORPORATE = "corporate"
    INDIVIDUAL = "individual"


_VENDOR_DISPLAY_NAMES = {
    BankVendor.DANSKE_BANK: "Danske Bank",
    BankVendor.CREDIT_BANK: "Credit Bank",
}
