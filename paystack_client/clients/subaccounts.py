"""
Subaccounts.

A subaccount receives part of a payment when a transaction is split between
your main account and a partner.
"""

from __future__ import annotations

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class SubAccountClient(ResourceClient):
    def create(
        self,
        business_name: str,
        settlement_bank: str,
        account_number: str,
        percentage_charge: float,
        description: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {
                "business_name": business_name,
                "settlement_bank": settlement_bank,
                "account_number": account_number,
                "percentage_charge": percentage_charge,
                "description": description,
            },
            *optional_payloads,
        )
        return self._call("POST", "/subaccount", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/subaccount", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/subaccount/{id_or_code}", response_model=response_model, timeout=timeout)

    def update(
        self,
        id_or_code: str,
        business_name: str,
        settlement_bank: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {"business_name": business_name, "settlement_bank": settlement_bank},
            *optional_payloads,
        )
        return self._call("PUT", f"/subaccount/{id_or_code}", payload, response_model, timeout=timeout)
