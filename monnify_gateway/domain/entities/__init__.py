"""Domain Entities - Credentials, tokens, envelopes and transactions."""

from .credentials import Credentials
from .envelope import (
    AuthMode,
    HttpMethod,
    RequestEnvelope,
    ResponseEnvelope,
    is_present,
)
from .token import BearerToken
from .transaction import TransactionSignatureInput

__all__ = [
    "Credentials",
    "AuthMode",
    "HttpMethod",
    "RequestEnvelope",
    "ResponseEnvelope",
    "is_present",
    "BearerToken",
    "TransactionSignatureInput",
]
