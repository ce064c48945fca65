"""Sub-account service - settlement sub-account management."""

from typing import Any, Iterable, Union

import structlog

from monnify_gateway.application.dto import SubAccountRequest
from monnify_gateway.domain.entities import AuthMode, HttpMethod, RequestEnvelope
from monnify_gateway.domain.exceptions import InvalidRequestError
from monnify_gateway.domain.interfaces import RequestDispatcher

logger = structlog.get_logger(__name__)

SUB_ACCOUNTS_PATH = "sub-accounts"


class SubAccountService:
    """
    Application service for sub-account use cases.

    All sub-account endpoints authenticate with the Basic credential.
    """

    def __init__(self, dispatcher: RequestDispatcher):
        self._dispatcher = dispatcher

    async def create_sub_accounts(
        self,
        accounts: Union[SubAccountRequest, Iterable[SubAccountRequest]],
    ) -> Any:
        """
        Create one or more sub-accounts.

        Args:
            accounts: A single request or an iterable of requests; the
                gateway always receives a JSON array

        Raises:
            InvalidRequestError: If any request fails validation
        """
        if isinstance(accounts, SubAccountRequest):
            accounts = [accounts]
        accounts = list(accounts)

        if not accounts:
            raise InvalidRequestError("at least one sub-account is required")

        errors = [
            f"[{index}] {error}"
            for index, account in enumerate(accounts)
            for error in account.validate()
        ]
        if errors:
            raise InvalidRequestError("; ".join(errors))

        logger.info("sub_accounts_create_requested", count=len(accounts))

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.POST,
                path=SUB_ACCOUNTS_PATH,
                body=[account.to_payload() for account in accounts],
                auth_mode=AuthMode.BASIC,
            )
        )

    async def get_sub_accounts(self) -> Any:
        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path=SUB_ACCOUNTS_PATH,
                auth_mode=AuthMode.BASIC,
            )
        )

    async def update_sub_account(self, account: SubAccountRequest) -> Any:
        """Update a sub-account identified by its sub_account_code."""
        errors = account.validate(for_update=True)
        if errors:
            raise InvalidRequestError("; ".join(errors))

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.PUT,
                path=SUB_ACCOUNTS_PATH,
                body=account.to_payload(for_update=True),
                auth_mode=AuthMode.BASIC,
            )
        )

    async def delete_sub_account(self, sub_account_code: str) -> Any:
        if not sub_account_code:
            raise InvalidRequestError("sub_account_code is required")

        logger.info("sub_account_delete_requested", sub_account_code=sub_account_code)

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.DELETE,
                path=f"{SUB_ACCOUNTS_PATH}/{sub_account_code}",
                auth_mode=AuthMode.BASIC,
            )
        )
