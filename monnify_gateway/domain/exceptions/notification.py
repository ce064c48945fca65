"""Inbound notification exceptions."""

from .base import MonnifyException


class SignatureMismatchError(MonnifyException):
    """Raised when a notification's signature does not match its computed hash."""

    def __init__(self, transaction_reference: str | None = None):
        super().__init__(
            message="Notification signature does not match transaction hash",
            code="SIGNATURE_MISMATCH",
        )
        self.transaction_reference = transaction_reference
