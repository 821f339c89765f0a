"""Bulk charges: charge many authorizations in one batch."""

from __future__ import annotations

from typing import Any

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.queries import Query, add_query_params_to_url


class BulkChargeClient(ResourceClient):
    def initiate(
        self,
        charges: Any,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """
        Queue a batch of charges.

        ``charges`` is sent as the request body itself: a list of
        ``{"authorization": code, "amount": n, "reference": ref}`` objects.
        """
        return self._call("POST", "/bulkcharge", charges, response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/bulkcharge", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        id_or_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/bulkcharge/{id_or_code}", response_model=response_model, timeout=timeout)

    def charges(
        self,
        id_or_code: str,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """List the charges in a batch."""
        url = add_query_params_to_url(f"/bulkcharge/{id_or_code}/charges", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def pause(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/bulkcharge/pause/{code}", response_model=response_model, timeout=timeout)

    def resume(
        self,
        code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/bulkcharge/resume/{code}", response_model=response_model, timeout=timeout)
