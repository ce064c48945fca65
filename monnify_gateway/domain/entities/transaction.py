"""Transaction entities used for notification hashing and listings."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class TransactionSignatureInput:
    """
    The fields of a payment notification covered by the transaction hash.

    Built per verification and never persisted.
    """

    payment_reference: Any
    amount_paid: Any
    paid_on: Any
    transaction_reference: Any

    @classmethod
    def from_notification(cls, payload: Any) -> "TransactionSignatureInput":
        """
        Read the hashed fields from a flat or eventData-wrapped notification.

        Malformed payloads yield all-None fields, which never match a
        genuine signature.
        """
        if not isinstance(payload, Mapping):
            payload = {}
        data = payload.get("eventData")
        if not isinstance(data, Mapping):
            data = payload
        return cls(
            payment_reference=data.get("paymentReference"),
            amount_paid=data.get("amountPaid"),
            paid_on=data.get("paidOn"),
            transaction_reference=data.get("transactionReference"),
        )
