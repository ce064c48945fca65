"""Data transfer objects for disbursement operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class DisbursementRequest:
    """A single transfer from the merchant wallet to a bank account."""

    reference: str
    amount: Union[int, float, Decimal]
    bank_code: str
    account_number: str
    narration: str = ""
    title: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.reference or not self.reference.strip():
            errors.append("reference is required")

        if isinstance(self.amount, Decimal) and not self.amount.is_finite():
            errors.append("amount must be a finite number")
        elif self.amount is None or self.amount <= 0:
            errors.append("amount must be positive")
        elif not _fits_json_number(self.amount):
            errors.append("amount cannot be sent exactly as a JSON number")

        if not self.bank_code:
            errors.append("bank_code is required")

        if not self.account_number:
            errors.append("account_number is required")

        return errors

    def to_payload(self, wallet_id: str, currency: str) -> Dict[str, Any]:
        amount = self.amount
        if isinstance(amount, Decimal):
            amount = float(amount)

        payload: Dict[str, Any] = {
            "reference": self.reference,
            "narration": self.narration or "",
            "walletId": wallet_id,
            "bankCode": self.bank_code,
            "accountNumber": self.account_number,
            "amount": amount,
            "currency": currency,
        }
        if self.title:
            payload["title"] = self.title
        return payload


def _fits_json_number(amount: Union[int, float, Decimal]) -> bool:
    # JSON numbers are decoded as doubles; a Decimal must survive the trip
    if isinstance(amount, Decimal):
        return Decimal(repr(float(amount))) == amount
    return True
