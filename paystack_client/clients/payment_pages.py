"""Payment pages: hosted pages that collect payment for products."""

from __future__ import annotations

from typing import List

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.payloads import OptionalPayload, apply_optional_payloads
from paystack_client.queries import Query, add_query_params_to_url


class PaymentPageClient(ResourceClient):
    def create(
        self,
        name: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"name": name}, *optional_payloads)
        return self._call("POST", "/page", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/page", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_slug: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/page/{id_or_slug}", response_model=response_model, timeout=timeout)

    def update(
        self,
        id_or_slug: str,
        name: str,
        description: str,
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"name": name, "description": description}, *optional_payloads)
        return self._call("PUT", f"/page/{id_or_slug}", payload, response_model, timeout=timeout)

    def check_slug(
        self,
        slug: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call(
            "GET", f"/page/check_slug_availability/{slug}", response_model=response_model, timeout=timeout
        )

    def add_products(
        self,
        page_id: str,
        products: List[str],
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Add products (by id) to a payment page."""
        payload = {"product": products}
        return self._call("POST", f"/page/{page_id}/product", payload, response_model, timeout=timeout)
