"""Application services (use cases)."""

from .disbursement_service import DisbursementService
from .reserved_account_service import ReservedAccountService
from .sub_account_service import SubAccountService
from .transaction_service import TransactionService
from .webhook_service import WebhookService

__all__ = [
    "DisbursementService",
    "ReservedAccountService",
    "SubAccountService",
    "TransactionService",
    "WebhookService",
]
