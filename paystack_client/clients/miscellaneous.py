from __future__ import annotations

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.queries import Query, add_query_params_to_url


class MiscellaneousClient(ResourceClient):
    """Reference data used as input to other endpoints."""

    def banks(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/bank", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def countries(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/country", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def states(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """States for address verification; pass country as a query."""
        url = add_query_params_to_url("/address_verification/states", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)
