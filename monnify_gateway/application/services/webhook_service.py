"""Webhook service - authenticity checks for inbound payment notifications."""

from typing import Any, Optional, Tuple

import structlog

from monnify_gateway.core.metrics import record_notification_verification
from monnify_gateway.domain.entities import TransactionSignatureInput
from monnify_gateway.domain.exceptions import SignatureMismatchError
from monnify_gateway.service.signing import (
    compute_transaction_hash,
    verify_signature,
)

logger = structlog.get_logger(__name__)


class WebhookService:
    """
    Verifies that payment notifications were issued by the gateway.

    The gateway hashes each notification with the merchant's client
    secret; a notification whose supplied hash does not match the one
    recomputed here must be rejected as untrusted.
    """

    def __init__(self, client_secret: str):
        self._client_secret = client_secret

    def compute_transaction_hash(self, fields: TransactionSignatureInput) -> str:
        return compute_transaction_hash(self._client_secret, fields)

    def verify_notification(
        self,
        payload: Any,
        signature: Optional[str],
    ) -> bool:
        """
        Check a notification payload against its supplied signature.

        Args:
            payload: Notification body, flat or wrapped in eventData
            signature: The hash supplied alongside the notification

        Returns:
            True only if the recomputed hash matches the signature
        """
        _, accepted = self._check(payload, signature)
        return accepted

    def verify_notification_or_raise(
        self,
        payload: Any,
        signature: Optional[str],
    ) -> TransactionSignatureInput:
        """
        Verify a notification and return its hashed fields.

        Raises:
            SignatureMismatchError: If the signature does not match
        """
        fields, accepted = self._check(payload, signature)
        if not accepted:
            raise SignatureMismatchError(fields.transaction_reference)
        return fields

    def _check(
        self,
        payload: Any,
        signature: Optional[str],
    ) -> Tuple[TransactionSignatureInput, bool]:
        fields = TransactionSignatureInput.from_notification(payload)
        expected = self.compute_transaction_hash(fields)
        accepted = verify_signature(expected, signature)

        record_notification_verification(accepted)
        if not accepted:
            logger.warning(
                "notification_rejected",
                transaction_reference=fields.transaction_reference,
                payment_reference=fields.payment_reference,
            )

        return fields, accepted
