"""
Domain Interfaces (Ports)
"""

from .clients import CredentialAuthority, RequestDispatcher

__all__ = [
    "CredentialAuthority",
    "RequestDispatcher",
]
