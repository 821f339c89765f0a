"""Verification (KYC): resolve bank accounts and card BINs."""

from __future__ import annotations

from typing import Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.contracts.enums import AccountType, Country, Document
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class VerificationClient(ResourceClient):
    def resolve_account(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Confirm an account's name; pass account_number and bank_code as queries."""
        url = add_query_params_to_url("/bank/resolve", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def validate_account(
        self,
        account_name: str,
        account_number: str,
        account_type: Union[AccountType, str],
        bank_code: str,
        country_code: Union[Country, str],
        document_type: Union[Document, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Confirm the authenticity of a customer's account number (South Africa)."""
        payload = apply_optional_payloads(
            {
                "account_name": account_name,
                "account_number": account_number,
                "account_type": account_type,
                "bank_code": bank_code,
                "country_code": country_code,
                "document_type": document_type,
            },
            *optional_payloads,
        )
        return self._call("POST", "/bank/validate", payload, response_model, timeout=timeout)

    def resolve_bin(
        self,
        bin: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Look up card details from the first six digits of a card."""
        return self._call("GET", f"/decision/bin/{bin}", response_model=response_model, timeout=timeout)
