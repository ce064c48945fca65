"""Data transfer objects for transaction queries."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TransactionSearch:
    """Filters for the merchant transaction search."""

    limit: Optional[int] = None
    skip: Optional[int] = None
    payment_status: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if self.limit is not None and self.limit <= 0:
            errors.append("limit must be positive")

        if self.skip is not None and self.skip < 0:
            errors.append("skip must not be negative")

        return errors

    def to_query(self) -> Dict[str, Any]:
        return {
            "size": self.limit,
            "page": self.skip,
            "paymentStatus": self.payment_status,
            "customerEmail": self.customer_email,
            "customerName": self.customer_name,
        }


@dataclass(frozen=True)
class TransactionPage:
    """One page of a paginated transaction listing."""

    transactions: List[Dict[str, Any]] = field(default_factory=list)
    transaction_count: int = 0

    @classmethod
    def from_body(cls, body: Any) -> "TransactionPage":
        if not isinstance(body, dict):
            return cls()
        return cls(
            transactions=list(body.get("content") or []),
            transaction_count=int(body.get("totalElements") or 0),
        )
