"""Gateway client implementations."""

from .credential_authority import (
    HttpCredentialAuthority,
    TokenCachePolicy,
    encode_basic_auth,
)
from .dispatcher import HttpRequestDispatcher

__all__ = [
    "HttpCredentialAuthority",
    "HttpRequestDispatcher",
    "TokenCachePolicy",
    "encode_basic_auth",
]
