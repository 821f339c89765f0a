"""Settlements: payouts made by Paystack to your bank account."""

from __future__ import annotations

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.queries import Query, add_query_params_to_url


class SettlementClient(ResourceClient):
    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/settlement", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def transactions(
        self,
        settlement_id: str,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """List the transactions that make up a settlement."""
        url = add_query_params_to_url(f"/settlement/{settlement_id}/transactions", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)
