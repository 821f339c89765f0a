"""
Paystack resource clients.

One client per Paystack resource family (transactions, plans, transfers, ...).
Every client:
- wraps a shared RestClient (never copies its configuration)
- builds a payload and a path, then calls RestClient.api_call
- returns the result unchanged: no response inspection, retries or caching

Clients can be used on their own, e.g. PlanClient.from_options(with_secret_key(...)),
or through the PaystackClient bundle.
"""

from .apple_pay import ApplePayClient
from .base import ApiResult, ResourceClient
from .bulk_charges import BulkChargeClient
from .charges import ChargeClient
from .customers import CustomerClient, DedicatedVirtualAccountClient
from .disputes import DisputeClient
from .integration import IntegrationClient
from .miscellaneous import MiscellaneousClient
from .payment_pages import PaymentPageClient
from .payment_requests import PaymentRequestClient
from .plans import PlanClient
from .products import ProductClient
from .refunds import RefundClient
from .settlements import SettlementClient
from .subaccounts import SubAccountClient
from .subscriptions import SubscriptionClient
from .terminals import TerminalClient
from .transactions import TransactionClient, TransactionSplitClient
from .transfers import TransferClient, TransferControlClient, TransferRecipientClient
from .verification import VerificationClient

__all__ = [
    "ApiResult",
    "ResourceClient",
    "ApplePayClient", "BulkChargeClient", "ChargeClient", "CustomerClient",
    "DedicatedVirtualAccountClient", "DisputeClient", "IntegrationClient",
    "MiscellaneousClient", "PaymentPageClient", "PaymentRequestClient",
    "PlanClient", "ProductClient", "RefundClient", "SettlementClient",
    "SubAccountClient", "SubscriptionClient", "TerminalClient",
    "TransactionClient", "TransactionSplitClient", "TransferClient",
    "TransferControlClient", "TransferRecipientClient", "VerificationClient",
]
