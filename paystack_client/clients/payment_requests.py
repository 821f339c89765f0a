"""Payment requests: invoices sent to customers for goods and services."""

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


class PaymentRequestClient(ResourceClient):
    def create(
        self,
        customer: str,
        amount: int,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Create a payment request.

        Args:
            customer: Customer id or code
            amount: Amount in the subunit of the currency
            optional_payloads: due_date, description, line_items, tax,
                currency, send_notification, draft, has_invoice,
                invoice_number, split_code
        """
        payload = apply_optional_payloads({"customer": customer, "amount": amount}, *optional_payloads)
        return self._call("POST", "/paymentrequest", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/paymentrequest", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/paymentrequest/{id_or_code}", response_model=response_model, timeout=timeout)

    def verify(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/paymentrequest/verify/{code}", response_model=response_model, timeout=timeout)

    def send_notification(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Send the customer a reminder email for the payment request."""
        return self._call("POST", f"/paymentrequest/notify/{code}", response_model=response_model, timeout=timeout)

    def totals(self, *, response_model: ResponseModel = None, timeout: TimeoutArg = USE_CLIENT_DEFAULT) -> ApiResult:
        return self._call("GET", "/paymentrequest/totals", response_model=response_model, timeout=timeout)

    def finalize(
        self,
        code: str,
        send_notification: bool,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Finalize a draft payment request."""
        payload = {"send_notification": send_notification}
        return self._call("POST", f"/paymentrequest/finalize/{code}", payload, response_model, timeout=timeout)

    def update(
        self,
        id_or_code: str,
        customer: str,
        amount: int,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"customer": customer, "amount": amount}, *optional_payloads)
        return self._call("PUT", f"/paymentrequest/{id_or_code}", payload, response_model, timeout=timeout)

    def archive(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("POST", f"/paymentrequest/archive/{code}", response_model=response_model, timeout=timeout)
