"""Data transfer objects for sub-account operations."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from monnify_gateway.service.signing import compact_params


@dataclass(frozen=True)
class SubAccountRequest:
    """A settlement sub-account, as created or updated on the gateway."""

    bank_code: str
    account_number: str
    email: str
    currency_code: str = "NGN"
    default_split_percentage: Optional[float] = None
    sub_account_code: Optional[str] = None

    def validate(self, *, for_update: bool = False) -> List[str]:
        errors = []

        if for_update:
            if not self.sub_account_code:
                errors.append("sub_account_code is required")
        else:
            if not self.bank_code:
                errors.append("bank_code is required")
            if not self.account_number:
                errors.append("account_number is required")
            if not self.email:
                errors.append("email is required")

        if self.default_split_percentage is not None and not (
            0 <= self.default_split_percentage <= 100
        ):
            errors.append("default_split_percentage must be between 0 and 100")

        return errors

    def to_payload(self, *, for_update: bool = False) -> Dict[str, Any]:
        payload = {
            "currencyCode": self.currency_code,
            "bankCode": self.bank_code,
            "accountNumber": self.account_number,
            "email": self.email,
            "defaultSplitPercentage": self.default_split_percentage,
        }
        if for_update:
            payload["subAccountCode"] = self.sub_account_code
        return compact_params(payload)
