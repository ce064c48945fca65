"""Credentials entity holding the merchant's gateway identity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """
    Immutable merchant credentials.

    Attributes:
        api_key: Merchant API key (MK_TEST_... / MK_PROD_...)
        client_secret: Secret paired with the API key, also used to hash
            inbound transaction notifications
        contract_code: Merchant contract code, required for reserved accounts
        wallet_id: Wallet funding disbursements
    """

    api_key: str
    client_secret: str = field(repr=False)
    contract_code: str = ""
    wallet_id: str = ""
