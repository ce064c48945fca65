"""Reserved account service - customer virtual accounts."""

from typing import Any, Optional

import structlog

from monnify_gateway.application.dto import ReservedAccountRequest, TransactionPage
from monnify_gateway.domain.entities import (
    AuthMode,
    Credentials,
    HttpMethod,
    RequestEnvelope,
)
from monnify_gateway.domain.exceptions import ConfigurationError, InvalidRequestError
from monnify_gateway.domain.interfaces import RequestDispatcher

logger = structlog.get_logger(__name__)

RESERVED_ACCOUNTS_PATH = "bank-transfer/reserved-accounts"


class ReservedAccountService:
    """
    Application service for reserved account use cases.

    All reserved account endpoints authenticate with a bearer token.
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        credentials: Credentials,
        currency_code: str = "NGN",
    ):
        self._dispatcher = dispatcher
        self._credentials = credentials
        self._currency_code = currency_code

    async def create_reserved_account(self, request: ReservedAccountRequest) -> Any:
        """
        Reserve a virtual account under the merchant's contract.

        Raises:
            ConfigurationError: If no contract code is configured
            InvalidRequestError: If the request fails validation
        """
        if not self._credentials.contract_code:
            raise ConfigurationError("contract_code is required to reserve accounts")

        errors = request.validate()
        if errors:
            raise InvalidRequestError("; ".join(errors))

        logger.info(
            "reserved_account_create_requested",
            account_reference=request.account_reference,
        )

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.POST,
                path=RESERVED_ACCOUNTS_PATH,
                body=request.to_payload(
                    contract_code=self._credentials.contract_code,
                    currency_code=self._currency_code,
                ),
                auth_mode=AuthMode.BEARER,
            )
        )

    async def get_reserved_account(self, account_reference: str) -> Any:
        if not account_reference:
            raise InvalidRequestError("account_reference is required")

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path=f"{RESERVED_ACCOUNTS_PATH}/{account_reference}",
                auth_mode=AuthMode.BEARER,
            )
        )

    async def get_reserved_account_transactions(
        self,
        account_reference: str,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> TransactionPage:
        if not account_reference:
            raise InvalidRequestError("account_reference is required")

        body = await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path=f"{RESERVED_ACCOUNTS_PATH}/transactions",
                query={
                    "size": limit,
                    "page": skip,
                    "accountReference": account_reference,
                },
                auth_mode=AuthMode.BEARER,
            )
        )
        return TransactionPage.from_body(body)

    async def delete_reserved_account(self, account_number: str) -> Any:
        if not account_number:
            raise InvalidRequestError("account_number is required")

        logger.info("reserved_account_delete_requested", account_number=account_number)

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.DELETE,
                path=f"{RESERVED_ACCOUNTS_PATH}/{account_number}",
                auth_mode=AuthMode.BEARER,
            )
        )
