"""
Monnify Gateway - Payment Gateway Client

An asyncio client for the Monnify payment gateway: credential handling,
request dispatch, response envelope unwrapping and verification of
inbound payment notifications.
"""

__version__ = "0.1.0"

from monnify_gateway.client import MonnifyClient  # noqa: E402
from monnify_gateway.core.config import Settings, get_settings  # noqa: E402
from monnify_gateway.domain.exceptions import (  # noqa: E402
    AuthenticationError,
    ConfigurationError,
    GatewayError,
    InvalidRequestError,
    MonnifyException,
    SignatureMismatchError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "__version__",
    "MonnifyClient",
    "Settings",
    "get_settings",
    "MonnifyException",
    "AuthenticationError",
    "ConfigurationError",
    "GatewayError",
    "InvalidRequestError",
    "SignatureMismatchError",
    "TransportError",
    "TransportTimeoutError",
]
