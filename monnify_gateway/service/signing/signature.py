"""
Transaction hash used to authenticate inbound payment notifications.

The gateway signs each notification with the SHA-512 hex digest of
``clientSecret|paymentReference|amountPaid|paidOn|transactionReference``.
A receiver recomputes the digest from the notification fields and
compares it with the supplied signature.
"""

import hashlib
import hmac
from typing import Any

from monnify_gateway.domain.entities import TransactionSignatureInput

FIELD_SEPARATOR = "|"


def sha512_hex(text: str) -> str:
    """Lowercase hex SHA-512 of the UTF-8 encoding of ``text``."""
    return hashlib.sha512(text.encode("utf-8")).hexdigest()


def compute_digest(
    secret: str,
    payment_reference: Any,
    amount_paid: Any,
    paid_on: Any,
    transaction_reference: Any,
) -> str:
    """
    Compute the transaction hash for a notification.

    Fields are joined in fixed order, formatted exactly as given. Malformed
    or missing fields produce a digest that will not match a genuine
    signature; this function never raises.

    Returns:
        128-character lowercase hex string
    """
    text = FIELD_SEPARATOR.join(
        str(value)
        for value in (
            secret,
            payment_reference,
            amount_paid,
            paid_on,
            transaction_reference,
        )
    )
    return sha512_hex(text)


def compute_transaction_hash(secret: str, fields: TransactionSignatureInput) -> str:
    return compute_digest(
        secret,
        fields.payment_reference,
        fields.amount_paid,
        fields.paid_on,
        fields.transaction_reference,
    )


def verify_signature(expected_digest: str, supplied_signature: str | None) -> bool:
    """
    Compare a computed digest with a supplied signature in constant time.

    Hex case is ignored. A missing signature never verifies.
    """
    if not supplied_signature:
        return False
    return hmac.compare_digest(
        expected_digest.strip().lower().encode("ascii", "replace"),
        supplied_signature.strip().lower().encode("ascii", "replace"),
    )
