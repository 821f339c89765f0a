"""Disputes raised against transactions on your integration."""

from __future__ import annotations

from typing import Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.contracts.enums import Resolution
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class DisputeClient(ResourceClient):
    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/dispute", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        dispute_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/dispute/{dispute_id}", response_model=response_model, timeout=timeout)

    def transaction_disputes(
        self,
        transaction_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call(
            "GET", f"/dispute/transaction/{transaction_id}", response_model=response_model, timeout=timeout
        )

    def update(
        self,
        dispute_id: str,
        refund_amount: int,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"refund_amount": refund_amount}, *optional_payloads)
        return self._call("PUT", f"/dispute/{dispute_id}", payload, response_model, timeout=timeout)

    def add_evidence(
        self,
        dispute_id: str,
        customer_email: str,
        customer_name: str,
        customer_phone: str,
        service_details: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {
                "customer_email": customer_email,
                "customer_name": customer_name,
                "customer_phone": customer_phone,
                "service_details": service_details,
            },
            *optional_payloads,
        )
        return self._call("POST", f"/dispute/{dispute_id}/evidence", payload, response_model, timeout=timeout)

    def upload_url(
        self,
        dispute_id: str,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Get a signed URL for uploading a dispute evidence file."""
        url = add_query_params_to_url(f"/dispute/{dispute_id}/upload_url", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def resolve(
        self,
        dispute_id: str,
        resolution: Union[Resolution, str],
        message: str,
        refund_amount: int,
        uploaded_filename: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {
                "resolution": resolution,
                "message": message,
                "refund_amount": refund_amount,
                "uploaded_filename": uploaded_filename,
            },
            *optional_payloads,
        )
        return self._call("PUT", f"/dispute/{dispute_id}/resolve", payload, response_model, timeout=timeout)

    def export(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/dispute/export", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)
