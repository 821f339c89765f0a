"""Subscriptions: recurring charges of a customer against a plan."""

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


class SubscriptionClient(ResourceClient):
    def create(
        self,
        customer: str,
        plan: str,
        authorization: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Create a subscription.

        Args:
            customer: Customer's email address or customer code
            plan: Plan code
            authorization: Authorization code to charge; the customer's most
                recent authorization is used when it is empty
        """
        payload = apply_optional_payloads(
            {"customer": customer, "plan": plan, "authorization": authorization},
            *optional_payloads,
        )
        return self._call("POST", "/subscription", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/subscription", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/subscription/{id_or_code}", response_model=response_model, timeout=timeout)

    def enable(
        self,
        code: str,
        token: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"code": code, "token": token}
        return self._call("POST", "/subscription/enable", payload, response_model, timeout=timeout)

    def disable(
        self,
        code: str,
        token: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"code": code, "token": token}
        return self._call("POST", "/subscription/disable", payload, response_model, timeout=timeout)

    def generate_link(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Generate a link the customer can use to update their card."""
        return self._call("GET", f"/subscription/{code}/manage/link/", response_model=response_model, timeout=timeout)

    def send_link(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Email the customer a link to update their card."""
        return self._call("POST", f"/subscription/{code}/manage/email/", response_model=response_model, timeout=timeout)
