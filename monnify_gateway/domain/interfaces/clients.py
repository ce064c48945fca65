"""Gateway client interfaces."""

from abc import ABC, abstractmethod
from typing import Any

from monnify_gateway.domain.entities import BearerToken, RequestEnvelope


class CredentialAuthority(ABC):
    """
    Source of auth material for gateway calls.

    Produces the static Basic credential and short-lived Bearer tokens.
    """

    @abstractmethod
    def basic_auth(self) -> str:
        """
        Return the Basic authorization header value.

        Pure function of the configured credentials; never performs I/O.
        """
        ...

    @abstractmethod
    async def login(self) -> BearerToken:
        """
        Obtain a fresh bearer token from the gateway.

        Raises:
            AuthenticationError: If the login call fails or returns no token
        """
        ...

    @abstractmethod
    async def bearer_auth(self) -> str:
        """
        Return a Bearer authorization header value.

        Raises:
            AuthenticationError: If no token could be obtained
        """
        ...

    def invalidate(self) -> None:
        """Drop any cached token. No-op for authorities that never cache."""


class RequestDispatcher(ABC):
    """
    Sends a request envelope to the gateway and unwraps the reply.
    """

    @abstractmethod
    async def send(self, envelope: RequestEnvelope) -> Any:
        """
        Dispatch a single gateway call.

        Args:
            envelope: Method, path, query, body and auth mode of the call

        Returns:
            responseBody when present and non-empty, else responseMessage

        Raises:
            TransportError: If the gateway is unreachable or its reply unreadable
            AuthenticationError: If Bearer auth was required and login failed
            GatewayError: If the envelope reports failure
        """
        ...
