"""
Transfers.

- TransferRecipientClient: beneficiaries you send money to
- TransferClient: sending money from your balance
- TransferControlClient: balance and OTP settings for transfers
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
from paystack_client.contracts.enums import Reason, RecipientType
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class TransferRecipientClient(ResourceClient):
    def create(
        self,
        recipient_type: Union[RecipientType, str],
        name: str,
        account_number: str,
        bank_code: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {
                "type": recipient_type,
                "name": name,
                "account_number": account_number,
                "bank_code": bank_code,
            },
            *optional_payloads,
        )
        return self._call("POST", "/transferrecipient", payload, response_model, timeout=timeout)

    def bulk_create(
        self,
        batch: Any,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Create several recipients at once; ``batch`` is a list of recipient objects."""
        payload = {"batch": batch}
        return self._call("POST", "/transferrecipient/bulk", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/transferrecipient", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/transferrecipient/{id_or_code}", response_model=response_model, timeout=timeout)

    def update(
        self,
        id_or_code: str,
        name: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"name": name}, *optional_payloads)
        return self._call("PUT", f"/transferrecipient/{id_or_code}", payload, response_model, timeout=timeout)

    def delete(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("DELETE", f"/transferrecipient/{id_or_code}", response_model=response_model, timeout=timeout)


class TransferClient(ResourceClient):
    def initiate(
        self,
        source: str,
        amount: int,
        recipient: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Send money to a recipient.

        Args:
            source: Where to debit from; only "balance" is supported
            amount: Amount in the subunit of the currency
            recipient: Transfer recipient code
        """
        payload = apply_optional_payloads(
            {"source": source, "amount": amount, "recipient": recipient},
            *optional_payloads,
        )
        return self._call("POST", "/transfer", payload, response_model, timeout=timeout)

    def finalize(
        self,
        transfer_code: str,
        otp: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"transfer_code": transfer_code, "otp": otp}
        return self._call("POST", "/transfer/finalize_transfer", payload, response_model, timeout=timeout)

    def bulk_initiate(
        self,
        source: str,
        transfers: Any,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"source": source, "transfers": transfers}
        return self._call("POST", "/transfer/bulk", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/transfer", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/transfer/{id_or_code}", response_model=response_model, timeout=timeout)

    def verify(
        self,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/transfer/verify/{reference}", response_model=response_model, timeout=timeout)


class TransferControlClient(ResourceClient):
    def balance(self, *, response_model: ResponseModel = None, timeout: TimeoutArg = USE_CLIENT_DEFAULT) -> ApiResult:
        return self._call("GET", "/balance", response_model=response_model, timeout=timeout)

    def balance_ledger(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/balance/ledger", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def resend_otp(
        self,
        transfer_code: str,
        reason: Union[Reason, str],
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"transfer_code": transfer_code, "reason": reason}
        return self._call("POST", "/transfer/resend_otp", payload, response_model, timeout=timeout)

    def disable_otp(
        self,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Start disabling OTP for transfers; Paystack sends an OTP to confirm."""
        return self._call("POST", "/transfer/disable_otp", response_model=response_model, timeout=timeout)

    def finalize_disable_otp(
        self,
        otp: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"otp": otp}
        return self._call("POST", "/transfer/disable_otp_finalize", payload, response_model, timeout=timeout)

    def enable_otp(
        self,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("POST", "/transfer/enable_otp", response_model=response_model, timeout=timeout)
