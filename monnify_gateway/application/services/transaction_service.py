"""Transaction service - status queries and merchant transaction search."""

from typing import Any, Optional

from monnify_gateway.application.dto import TransactionPage, TransactionSearch
from monnify_gateway.domain.entities import AuthMode, HttpMethod, RequestEnvelope
from monnify_gateway.domain.exceptions import InvalidRequestError
from monnify_gateway.domain.interfaces import RequestDispatcher


class TransactionService:
    """
    Application service for transaction queries.

    Both endpoints authenticate with a bearer token.
    """

    def __init__(self, dispatcher: RequestDispatcher):
        self._dispatcher = dispatcher

    async def get_transaction_status(
        self,
        payment_reference: Optional[str] = None,
        transaction_reference: Optional[str] = None,
    ) -> Any:
        """
        Query a transaction by payment or transaction reference.

        Raises:
            InvalidRequestError: If neither reference is given
        """
        if not payment_reference and not transaction_reference:
            raise InvalidRequestError(
                "payment_reference or transaction_reference is required"
            )

        return await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path="merchant/transactions/query",
                query={
                    "paymentReference": payment_reference,
                    "transactionReference": transaction_reference,
                },
                auth_mode=AuthMode.BEARER,
            )
        )

    async def search_transactions(
        self, search: Optional[TransactionSearch] = None
    ) -> TransactionPage:
        """Return one page of the merchant's transaction history."""
        search = search or TransactionSearch()
        errors = search.validate()
        if errors:
            raise InvalidRequestError("; ".join(errors))

        body = await self._dispatcher.send(
            RequestEnvelope(
                method=HttpMethod.GET,
                path="transactions/search",
                query=search.to_query(),
                auth_mode=AuthMode.BEARER,
            )
        )
        return TransactionPage.from_body(body)
