"""Disbursement service - wallet balance, account validation and payouts."""

from typing import Any

import structlog

from monnify_gateway.application.dto import DisbursementRequest
from monnify_gateway.domain.entities import (
    AuthMode,
    Credentials,
    HttpMethod,
    RequestEnvelope,
)
from monnify_gateway.domain.exceptions import ConfigurationError, InvalidRequestError
from monnify_gateway.domain.interfaces import RequestDispatcher

logger = structlog.get_logger(__name__)


class DisbursementService:
    """
    Application service for disbursement use cases.

    Disbursement endpoints authenticate with the Basic credential. A
    single disbursement is not idempotent, so failures surface as-is and
    are never retried here.
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

    def _wallet_id(self) -> str:
        if not self._credentials.wallet_id:
            raise ConfigurationError("wallet_id is required for disbursements")
        return self._credentials.wallet_id

    async def get_wallet_balance(self) -> Any:
        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path="disbursements/wallet-balance",
                query={"walletId": self._wallet_id()},
                auth_mode=AuthMode.BASIC,
            )
        )

    async def validate_bank_account(self, account_number: str, bank_code: str) -> Any:
        """Resolve the account name behind a bank account number."""
        if not account_number or not bank_code:
            raise InvalidRequestError("account_number and bank_code are required")

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path="disbursements/account/validate",
                query={"accountNumber": account_number, "bankCode": bank_code},
                auth_mode=AuthMode.BASIC,
            )
        )

    async def disburse(self, request: DisbursementRequest) -> Any:
        """
        Send a single transfer from the merchant wallet.

        Raises:
            InvalidRequestError: If the request fails validation
            GatewayError: If the gateway reports requestSuccessful false
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestError("; ".join(errors))

        wallet_id = self._wallet_id()

        log = logger.bind(reference=request.reference)
        log.info("disbursement_requested", bank_code=request.bank_code)

        result = await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.POST,
                path="disbursements/single",
                body=request.to_payload(
                    wallet_id=wallet_id,
                    currency=self._currency_code,
                ),
                auth_mode=AuthMode.BASIC,
            )
        )

        log.info("disbursement_accepted")
        return result
