"""Apple Pay domain registration."""

from __future__ import annotations

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.queries import Query, add_query_params_to_url


class ApplePayClient(ResourceClient):
    def register(
        self,
        domain_name: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Register a top-level domain or subdomain for Apple Pay."""
        payload = {"domainName": domain_name}
        return self._call("POST", "/apple-pay/domain", payload, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/apple-pay/domain", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def unregister(
        self,
        domain_name: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"domainName": domain_name}
        return self._call("DELETE", "/apple-pay/domain", payload, response_model, timeout=timeout)
