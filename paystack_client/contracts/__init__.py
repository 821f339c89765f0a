"""
Contracts (data models).

This folder defines the shapes exchanged with Paystack:
- enums for the constrained string values the API accepts
- the raw Response returned by every client method
- PaystackResponse, the typed envelope used when a response_model is given

Enums are passed through as-is. The API, not this package, decides which
values are valid for an endpoint.
"""

from .enums import (
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
    Reason,
    RecipientType,
    Resolution,
    RiskAction,
    Schedule,
    SplitType,
    SupportedCountryRelationshipType,
    TerminalEvent,
    TerminalEventAction,
    TransactionStatus,
)
from .responses import PaystackResponse, Response

__all__ = [
    # enums
    "AccountType", "BankType", "Bearer", "BulkChargeStatus", "Channel",
    "Country", "Currency", "DisputeStatus", "Document", "Domain", "Gateway",
    "GenericStatus", "Identification", "Interval", "Reason", "RecipientType",
    "Resolution", "RiskAction", "Schedule", "SplitType",
    "SupportedCountryRelationshipType", "TerminalEvent",
    "TerminalEventAction", "TransactionStatus",
    # responses
    "PaystackResponse", "Response",
]
