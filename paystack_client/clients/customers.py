"""
Customers and dedicated virtual accounts.
"""

from __future__ import annotations

from typing import Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.contracts.enums import Country, Identification
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class CustomerClient(ResourceClient):
    def create(
        self,
        email: str,
        first_name: str,
        last_name: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Create a customer. Pass phone and metadata as optional payloads."""
        payload = apply_optional_payloads(
            {"email": email, "first_name": first_name, "last_name": last_name},
            *optional_payloads,
        )
        return self._call("POST", "/customer", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/customer", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        email_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/customer/{email_or_code}", response_model=response_model, timeout=timeout)

    def update(
        self,
        code: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Update a customer. Every field is optional: first_name, last_name, phone, metadata."""
        payload = apply_optional_payloads({}, *optional_payloads)
        return self._call("PUT", f"/customer/{code}", payload, response_model, timeout=timeout)

    def validate(
        self,
        code: str,
        first_name: str,
        last_name: str,
        identification_type: Union[Identification, str],
        value: str,
        country: Union[Country, str],
        bvn: str,
        bank_code: str,
        account_number: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Validate a customer's identity.

        Paystack answers asynchronously: the outcome is delivered through the
        customeridentification.success / .failed webhooks.
        """
        payload = apply_optional_payloads(
            {
                "first_name": first_name,
                "last_name": last_name,
                "type": identification_type,
                "value": value,
                "country": country,
                "bvn": bvn,
                "bank_code": bank_code,
                "account_number": account_number,
            },
            *optional_payloads,
        )
        return self._call("POST", f"/customer/{code}/identification", payload, response_model, timeout=timeout)

    def flag(
        self,
        email_or_code: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Whitelist or blacklist a customer; pass risk_action as an optional payload."""
        payload = apply_optional_payloads({"customer": email_or_code}, *optional_payloads)
        return self._call("POST", "/customer/set_risk_action", payload, response_model, timeout=timeout)

    def deactivate(
        self,
        authorization_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Deactivate an authorization when the card should no longer be charged."""
        payload = {"authorization_code": authorization_code}
        return self._call("POST", "/customer/deactivate_authorization", payload, response_model, timeout=timeout)


class DedicatedVirtualAccountClient(ResourceClient):
    """Unique bank accounts for customers (Nigeria and Ghana only)."""

    def create(
        self,
        customer_id_or_code: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"customer": customer_id_or_code}, *optional_payloads)
        return self._call("POST", "/dedicated_account", payload, response_model, timeout=timeout)

    def assign(
        self,
        email: str,
        first_name: str,
        last_name: str,
        phone: str,
        preferred_bank: str,
        country: Union[Country, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Create a customer, validate them and assign a dedicated account in one call."""
        payload = apply_optional_payloads(
            {
                "email": email,
                "first_name": first_name,
                "last_name": last_name,
                "phone": phone,
                "preferred_bank": preferred_bank,
                "country": country,
            },
            *optional_payloads,
        )
        return self._call("POST", "/dedicated_account/assign", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/dedicated_account", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        account_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/dedicated_account/{account_id}", response_model=response_model, timeout=timeout)

    def requery(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Ask Paystack to re-check an account for transactions (account_number, provider_slug, date)."""
        url = add_query_params_to_url("/dedicated_account/requery", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def deactivate(
        self,
        account_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("DELETE", f"/dedicated_account/{account_id}", response_model=response_model, timeout=timeout)

    def providers(self, *, response_model: ResponseModel = None, timeout: TimeoutArg = USE_CLIENT_DEFAULT) -> ApiResult:
        return self._call(
            "GET", "/dedicated_account/available_providers", response_model=response_model, timeout=timeout
        )
