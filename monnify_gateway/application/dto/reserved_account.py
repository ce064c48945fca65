"""Data transfer objects for reserved account operations."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from monnify_gateway.service.signing import compact_params


@dataclass(frozen=True)
class ReservedAccountRequest:
    """Input for reserving a virtual account for a customer."""

    account_reference: str
    account_name: str
    customer_email: str
    customer_name: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.account_reference or not self.account_reference.strip():
            errors.append("account_reference is required")

        if not self.account_name or not self.account_name.strip():
            errors.append("account_name is required")

        if not self.customer_email:
            errors.append("customer_email is required")

        return errors

    def to_payload(self, contract_code: str, currency_code: str) -> Dict[str, Any]:
        return compact_params(
            {
                "accountReference": self.account_reference,
                "accountName": self.account_name,
                "currencyCode": currency_code,
                "contractCode": contract_code,
                "customerEmail": self.customer_email,
                "customerName": self.customer_name,
            }
        )
