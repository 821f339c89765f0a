"""
Transactions and transaction splits.

Transactions let you create and manage payments on your integration.
Transaction splits divide the settlement of a transaction between your
payout account and one or more subaccounts.
"""

from __future__ import annotations

from typing import Any, Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.contracts.enums import Currency, SplitType
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class TransactionClient(ResourceClient):
    def initialize(
        self,
        amount: int,
        email: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Initialize a transaction.

        Args:
            amount: Amount in the subunit of the currency (kobo, pesewas, cents)
            email: Customer's email address
            optional_payloads: Extra fields such as currency, reference,
                callback_url, plan, channels, metadata
        """
        payload = apply_optional_payloads({"amount": amount, "email": email}, *optional_payloads)
        return self._call("POST", "/transaction/initialize", payload, response_model, timeout=timeout)

    def verify(
        self,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Confirm the status of a transaction."""
        return self._call("GET", f"/transaction/verify/{reference}", response_model=response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """List transactions; filter with perPage, page, customer, status, from, to, amount."""
        url = add_query_params_to_url("/transaction", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        transaction_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/transaction/{transaction_id}", response_model=response_model, timeout=timeout)

    def charge_authorization(
        self,
        amount: int,
        email: str,
        authorization_code: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Charge a reusable authorization from a previous transaction."""
        payload = apply_optional_payloads(
            {"amount": amount, "email": email, "authorization_code": authorization_code},
            *optional_payloads,
        )
        return self._call("POST", "/transaction/charge_authorization", payload, response_model, timeout=timeout)

    def timeline(
        self,
        id_or_reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call(
            "GET", f"/transaction/timeline/{id_or_reference}", response_model=response_model, timeout=timeout
        )

    def totals(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Total amount received on your account."""
        url = add_query_params_to_url("/transaction/totals", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def export(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/transaction/export", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def partial_debit(
        self,
        authorization_code: str,
        currency: Union[Currency, str],
        amount: Union[int, str],
        email: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Retrieve part of a payment from a customer."""
        payload = apply_optional_payloads(
            {
                "authorization_code": authorization_code,
                "currency": currency,
                "amount": amount,
                "email": email,
            },
            *optional_payloads,
        )
        return self._call("POST", "/transaction/partial_debit", payload, response_model, timeout=timeout)


class TransactionSplitClient(ResourceClient):
    def create(
        self,
        name: str,
        split_type: Union[SplitType, str],
        currency: Union[Currency, str],
        subaccounts: Any,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Create a split payment on your integration.

        ``subaccounts`` is a list of ``{"subaccount": code, "share": n}`` objects.
        """
        payload = apply_optional_payloads(
            {
                "name": name,
                "type": split_type,
                "currency": currency,
                "subaccounts": subaccounts,
            },
            *optional_payloads,
        )
        return self._call("POST", "/split", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/split", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        split_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/split/{split_id}", response_model=response_model, timeout=timeout)

    def update(
        self,
        split_id: str,
        name: str,
        active: bool,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"name": name, "active": active}, *optional_payloads)
        return self._call("PUT", f"/split/{split_id}", payload, response_model, timeout=timeout)

    def add_subaccount(
        self,
        split_id: str,
        subaccount: str,
        share: int,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Add a subaccount to a split, or update its share if already present."""
        payload = {"subaccount": subaccount, "share": share}
        return self._call("POST", f"/split/{split_id}/subaccount/add", payload, response_model, timeout=timeout)

    def remove_subaccount(
        self,
        split_id: str,
        subaccount: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"subaccount": subaccount}
        return self._call("POST", f"/split/{split_id}/subaccount/remove", payload, response_model, timeout=timeout)
