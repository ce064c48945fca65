"""Data Transfer Objects for application layer."""

from .disbursement import DisbursementRequest
from .reserved_account import ReservedAccountRequest
from .sub_account import SubAccountRequest
from .transaction import TransactionPage, TransactionSearch

__all__ = [
    "DisbursementRequest",
    "ReservedAccountRequest",
    "SubAccountRequest",
    "TransactionPage",
    "TransactionSearch",
]
