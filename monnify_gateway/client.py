"""
Monnify client - composes credentials, dispatch and endpoint services.

One client is built per configuration; several clients (e.g. sandbox and
production) can coexist in the same process.
"""

import time
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, Optional, Union

import httpx
import structlog

from monnify_gateway.application.dto import (
    DisbursementRequest,
    ReservedAccountRequest,
    SubAccountRequest,
    TransactionPage,
    TransactionSearch,
)
from monnify_gateway.application.services import (
    DisbursementService,
    ReservedAccountService,
    SubAccountService,
    TransactionService,
    WebhookService,
)
from monnify_gateway.core.config import Settings, get_settings
from monnify_gateway.domain.entities import Credentials, TransactionSignatureInput
from monnify_gateway.domain.interfaces import CredentialAuthority, RequestDispatcher
from monnify_gateway.infrastructure.clients import (
    HttpCredentialAuthority,
    HttpRequestDispatcher,
    TokenCachePolicy,
)

logger = structlog.get_logger(__name__)


class MonnifyClient:
    """
    Entry point for the Monnify gateway.

    Usage:
        async with MonnifyClient(Settings(api_key=..., client_secret=...)) as client:
            balance = await client.get_wallet_balance()

    Args:
        settings: Configuration; defaults to the environment-loaded settings
        http_client: Shared httpx client; the caller keeps ownership
        transport: httpx transport for a client built here (e.g.
            ``httpx.MockTransport`` in tests)
        clock: Monotonic clock used for token expiry
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings or get_settings()
        self.credentials: Credentials = self.settings.credentials()

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=self.settings.timeout,
            transport=transport,
        )

        api_base_url = self.settings.api_base_url

        self.authority: CredentialAuthority = HttpCredentialAuthority(
            self.credentials,
            self._http_client,
            api_base_url,
            timeout=self.settings.timeout,
            policy=TokenCachePolicy(
                enabled=self.settings.token_cache_enabled,
                leeway=self.settings.token_expiry_leeway,
            ),
            clock=clock,
        )
        self.dispatcher: RequestDispatcher = HttpRequestDispatcher(
            self.authority,
            self._http_client,
            api_base_url,
            timeout=self.settings.timeout,
        )

        currency_code = self.settings.currency_code
        self.sub_accounts = SubAccountService(self.dispatcher)
        self.transactions = TransactionService(self.dispatcher)
        self.reserved_accounts = ReservedAccountService(
            self.dispatcher, self.credentials, currency_code
        )
        self.disbursements = DisbursementService(
            self.dispatcher, self.credentials, currency_code
        )
        self.webhooks = WebhookService(self.credentials.client_secret)

        logger.debug(
            "monnify_client_created",
            environment=self.settings.environment.value,
            base_url=api_base_url,
            token_cache_enabled=self.settings.token_cache_enabled,
        )

    async def __aenter__(self) -> "MonnifyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    # Authentication

    async def login(self) -> str:
        """Obtain a fresh bearer token string; never served from cache."""
        token = await self.authority.login()
        return token.value

    # Sub-accounts

    async def create_sub_accounts(
        self,
        accounts: Union[SubAccountRequest, Iterable[SubAccountRequest]],
    ) -> Any:
        return await self.sub_accounts.create_sub_accounts(accounts)

    async def get_sub_accounts(self) -> Any:
        return await self.sub_accounts.get_sub_accounts()

    async def update_sub_account(self, account: SubAccountRequest) -> Any:
        return await self.sub_accounts.update_sub_account(account)

    async def delete_sub_account(self, sub_account_code: str) -> Any:
        return await self.sub_accounts.delete_sub_account(sub_account_code)

    # Transactions

    async def get_transaction_status(
        self,
        payment_reference: Optional[str] = None,
        transaction_reference: Optional[str] = None,
    ) -> Any:
        return await self.transactions.get_transaction_status(
            payment_reference=payment_reference,
            transaction_reference=transaction_reference,
        )

    async def search_transactions(
        self,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
        payment_status: Optional[str] = None,
        customer_name: Optional[str] = None,
        customer_email: Optional[str] = None,
    ) -> TransactionPage:
        return await self.transactions.search_transactions(
            TransactionSearch(
                limit=limit,
                skip=skip,
                payment_status=payment_status,
                customer_name=customer_name,
                customer_email=customer_email,
            )
        )

    # Reserved accounts

    async def create_reserved_account(
        self,
        account_reference: str,
        account_name: str,
        customer_email: str,
        customer_name: Optional[str] = None,
    ) -> Any:
        return await self.reserved_accounts.create_reserved_account(
            ReservedAccountRequest(
                account_reference=account_reference,
                account_name=account_name,
                customer_email=customer_email,
                customer_name=customer_name,
            )
        )

    async def get_reserved_account(self, account_reference: str) -> Any:
        return await self.reserved_accounts.get_reserved_account(account_reference)

    async def get_reserved_account_transactions(
        self,
        account_reference: str,
        limit: Optional[int] = None,
        skip: Optional[int] = None,
    ) -> TransactionPage:
        return await self.reserved_accounts.get_reserved_account_transactions(
            account_reference, limit=limit, skip=skip
        )

    async def delete_reserved_account(self, account_number: str) -> Any:
        return await self.reserved_accounts.delete_reserved_account(account_number)

    # Disbursements

    async def get_wallet_balance(self) -> Any:
        return await self.disbursements.get_wallet_balance()

    async def validate_bank_account(self, account_number: str, bank_code: str) -> Any:
        return await self.disbursements.validate_bank_account(account_number, bank_code)

    async def disburse(
        self,
        reference: str,
        amount: Union[int, float, Decimal],
        bank_code: str,
        account_number: str,
        narration: str = "",
        title: Optional[str] = None,
    ) -> Any:
        return await self.disbursements.disburse(
            DisbursementRequest(
                reference=reference,
                amount=amount,
                bank_code=bank_code,
                account_number=account_number,
                narration=narration,
                title=title,
            )
        )

    # Notifications

    def compute_transaction_hash(
        self,
        payment_reference: Any,
        amount_paid: Any,
        paid_on: Any,
        transaction_reference: Any,
    ) -> str:
        return self.webhooks.compute_transaction_hash(
            TransactionSignatureInput(
                payment_reference=payment_reference,
                amount_paid=amount_paid,
                paid_on=paid_on,
                transaction_reference=transaction_reference,
            )
        )

    def verify_notification(
        self, payload: Dict[str, Any], signature: Optional[str]
    ) -> bool:
        return self.webhooks.verify_notification(payload, signature)
