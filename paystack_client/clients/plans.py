"""
Plans.

A plan is an installment/recurring payment option that subscriptions are
created against.
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
from paystack_client.contracts.enums import Interval
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class PlanClient(ResourceClient):
    def create(
        self,
        name: str,
        amount: int,
        interval: Union[Interval, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Create a plan.

        Args:
            name: Name of the plan
            amount: Amount in the subunit of the currency
            interval: Billing interval, e.g. Interval.MONTHLY
            optional_payloads: description, send_invoices, send_sms,
                currency, invoice_limit
        """
        payload = apply_optional_payloads(
            {"name": name, "amount": amount, "interval": interval},
            *optional_payloads,
        )
        return self._call("POST", "/plan", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/plan", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/plan/{id_or_code}", response_model=response_model, timeout=timeout)

    def update(
        self,
        id_or_code: str,
        name: str,
        amount: int,
        interval: Union[Interval, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {"name": name, "amount": amount, "interval": interval},
            *optional_payloads,
        )
        return self._call("PUT", f"/plan/{id_or_code}", payload, response_model, timeout=timeout)
