"""Products: inventory items sold through payment pages and requests."""

from __future__ import annotations

from typing import Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.contracts.enums import Currency
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class ProductClient(ResourceClient):
    def create(
        self,
        name: str,
        description: str,
        price: int,
        currency: Union[Currency, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {"name": name, "description": description, "price": price, "currency": currency},
            *optional_payloads,
        )
        return self._call("POST", "/product", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/product", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        product_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/product/{product_id}", response_model=response_model, timeout=timeout)

    def update(
        self,
        product_id: str,
        name: str,
        description: str,
        price: int,
        currency: Union[Currency, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads(
            {"name": name, "description": description, "price": price, "currency": currency},
            *optional_payloads,
        )
        return self._call("PUT", f"/product/{product_id}", payload, response_model, timeout=timeout)
