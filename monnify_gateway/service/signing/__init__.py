"""
Signing Module - query encoding and notification hashing.
"""

from .query import compact_params, encode_query
from .signature import (
    compute_digest,
    compute_transaction_hash,
    sha512_hex,
    verify_signature,
)

__all__ = [
    # Query
    "compact_params",
    "encode_query",
    # Signature
    "compute_digest",
    "compute_transaction_hash",
    "sha512_hex",
    "verify_signature",
]
