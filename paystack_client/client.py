"""
PaystackClient: every resource client bound to one shared RestClient.

    from paystack_client import PaystackClient, with_secret_key

    with PaystackClient(with_secret_key("sk_test_...")) as paystack:
        response = paystack.transactions.verify("ref-123")
        print(response.status_code, response.json())
"""

from __future__ import annotations

from typing import Optional

from paystack_client.clients import (
    ApplePayClient,
    BulkChargeClient,
    ChargeClient,
    CustomerClient,
    DedicatedVirtualAccountClient,
    DisputeClient,
    IntegrationClient,
    MiscellaneousClient,
    PaymentPageClient,
    PaymentRequestClient,
    PlanClient,
    ProductClient,
    RefundClient,
    SettlementClient,
    SubAccountClient,
    SubscriptionClient,
    TerminalClient,
    TransactionClient,
    TransactionSplitClient,
    TransferClient,
    TransferControlClient,
    TransferRecipientClient,
    VerificationClient,
)
from paystack_client.config import ClientConfig, ClientOption, build_config, config_from_env
from paystack_client.rest_client import RestClient


class PaystackClient:
    def __init__(self, *options: ClientOption, config: Optional[ClientConfig] = None) -> None:
        if config is not None:
            for option in options:
                config = option(config)
        else:
            config = build_config(*options)
        self.rest_client = RestClient(config)

        rest = self.rest_client
        self.transactions = TransactionClient(rest)
        self.transaction_splits = TransactionSplitClient(rest)
        self.terminals = TerminalClient(rest)
        self.customers = CustomerClient(rest)
        self.dedicated_virtual_accounts = DedicatedVirtualAccountClient(rest)
        self.apple_pay = ApplePayClient(rest)
        self.subaccounts = SubAccountClient(rest)
        self.plans = PlanClient(rest)
        self.subscriptions = SubscriptionClient(rest)
        self.products = ProductClient(rest)
        self.payment_pages = PaymentPageClient(rest)
        self.payment_requests = PaymentRequestClient(rest)
        self.settlements = SettlementClient(rest)
        self.transfer_recipients = TransferRecipientClient(rest)
        self.transfers = TransferClient(rest)
        self.transfer_control = TransferControlClient(rest)
        self.bulk_charges = BulkChargeClient(rest)
        self.integration = IntegrationClient(rest)
        self.charges = ChargeClient(rest)
        self.disputes = DisputeClient(rest)
        self.refunds = RefundClient(rest)
        self.verification = VerificationClient(rest)
        self.miscellaneous = MiscellaneousClient(rest)

    @classmethod
    def from_env(cls, *options: ClientOption, load_env_file: bool = True) -> "PaystackClient":
        """Build from PAYSTACK_SECRET_KEY / PAYSTACK_BASE_URL, then apply ``options``."""
        return cls(*options, config=config_from_env(load_env_file=load_env_file))

    @property
    def config(self) -> ClientConfig:
        return self.rest_client.config

    def close(self) -> None:
        self.rest_client.close()

    def __enter__(self) -> "PaystackClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
