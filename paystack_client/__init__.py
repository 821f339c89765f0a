"""
Python client for the Paystack REST API.

Layout:
- rest_client.RestClient performs every HTTP call (auth headers, JSON body)
- clients/* expose one resource client per Paystack resource
- client.PaystackClient bundles all resource clients over one RestClient
- payloads / queries compose optional body fields and query strings
- contracts/* hold enums and response shapes

Responses are returned as-is: a 4xx/5xx from Paystack is a normal Response,
not an exception. Only failures to make the request raise PaystackError.
"""

from .client import PaystackClient
from .clients import (
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
    ApiResult,
    ResourceClient,
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
from .config import (
    BASE_URL,
    ClientConfig,
    ClientOption,
    build_config,
    config_from_env,
    load_config_file,
    with_base_url,
    with_http_client,
    with_secret_key,
)
from .contracts import (
    AccountType,
    BankType,
    Bearer,
    BulkChargeStatus,
    Channel,
    Country,
    Currency,
    DisputeStatus,
    Document,
    Domain,
    Gateway,
    GenericStatus,
    Identification,
    Interval,
    PaystackResponse,
    Reason,
    RecipientType,
    Resolution,
    Response,
    RiskAction,
    Schedule,
    SplitType,
    SupportedCountryRelationshipType,
    TerminalEvent,
    TerminalEventAction,
    TransactionStatus,
)
from .exceptions import (
    MissingSecretKeyError,
    PayloadSerializationError,
    PaystackError,
    ResponseDeserializationError,
    TransportError,
)
from .payloads import OptionalPayload, apply_optional_payloads, with_optional_payload
from .queries import Query, add_query_params_to_url, with_query
from .rest_client import USER_AGENT, VERSION, RestClient

__version__ = VERSION

__all__ = [
    # bundle + core
    "PaystackClient", "RestClient", "ResourceClient", "ApiResult", "VERSION", "USER_AGENT",
    # resource clients
    "ApplePayClient", "BulkChargeClient", "ChargeClient", "CustomerClient",
    "DedicatedVirtualAccountClient", "DisputeClient", "IntegrationClient",
    "MiscellaneousClient", "PaymentPageClient", "PaymentRequestClient",
    "PlanClient", "ProductClient", "RefundClient", "SettlementClient",
    "SubAccountClient", "SubscriptionClient", "TerminalClient",
    "TransactionClient", "TransactionSplitClient", "TransferClient",
    "TransferControlClient", "TransferRecipientClient", "VerificationClient",
    # config
    "BASE_URL", "ClientConfig", "ClientOption", "build_config",
    "config_from_env", "load_config_file", "with_base_url",
    "with_http_client", "with_secret_key",
    # composition
    "OptionalPayload", "apply_optional_payloads", "with_optional_payload",
    "Query", "add_query_params_to_url", "with_query",
    # errors
    "PaystackError", "MissingSecretKeyError", "PayloadSerializationError",
    "TransportError", "ResponseDeserializationError",
    # contracts
    "Response", "PaystackResponse",
    "AccountType", "BankType", "Bearer", "BulkChargeStatus", "Channel",
    "Country", "Currency", "DisputeStatus", "Document", "Domain", "Gateway",
    "GenericStatus", "Identification", "Interval", "Reason", "RecipientType",
    "Resolution", "RiskAction", "Schedule", "SplitType",
    "SupportedCountryRelationshipType", "TerminalEvent",
    "TerminalEventAction", "TransactionStatus",
]
