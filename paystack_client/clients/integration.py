from __future__ import annotations

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)


class IntegrationClient(ResourceClient):
    """Settings of your Paystack integration."""

    def timeout(self, *, response_model: ResponseModel = None, timeout: TimeoutArg = USE_CLIENT_DEFAULT) -> ApiResult:
        """Fetch the payment session timeout."""
        return self._call("GET", "/integration/payment_session_timeout", response_model=response_model, timeout=timeout)

    def update_timeout(
        self,
        session_timeout: int,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Set the payment session timeout in seconds; 0 disables it."""
        payload = {"timeout": session_timeout}
        return self._call("PUT", "/integration/payment_session_timeout", payload, response_model, timeout=timeout)
