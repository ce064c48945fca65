"""Client Exceptions - Transport, authentication and gateway failures."""

from .base import MonnifyException
from .auth import AuthenticationError
from .config import ConfigurationError
from .gateway import GatewayError, InvalidRequestError
from .notification import SignatureMismatchError
from .transport import TransportError, TransportTimeoutError

__all__ = [
    "MonnifyException",
    "AuthenticationError",
    "ConfigurationError",
    "GatewayError",
    "InvalidRequestError",
    "SignatureMismatchError",
    "TransportError",
    "TransportTimeoutError",
]
