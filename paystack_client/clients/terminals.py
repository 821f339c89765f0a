"""
Terminals.

Used for in-person payments on Paystack Terminal devices: push events to a
device, check whether it is online, and commission/decommission it.
"""

from __future__ import annotations

from typing import Any, Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.contracts.enums import TerminalEvent, TerminalEventAction
from paystack_client.queries import Query, add_query_params_to_url


class TerminalClient(ResourceClient):
    def send_event(
        self,
        terminal_id: str,
        event_type: Union[TerminalEvent, str],
        action: Union[TerminalEventAction, str],
        data: Any,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Send an invoice or transaction event to a terminal."""
        payload = {"type": event_type, "action": action, "data": data}
        return self._call("POST", f"/terminal/{terminal_id}/event", payload, response_model, timeout=timeout)

    def event_status(
        self,
        terminal_id: str,
        event_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Check whether a sent event was delivered to the terminal."""
        return self._call(
            "GET", f"/terminal/{terminal_id}/event/{event_id}", response_model=response_model, timeout=timeout
        )

    def terminal_status(
        self,
        terminal_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Check whether the terminal is online and available."""
        return self._call("GET", f"/terminal/{terminal_id}/presence", response_model=response_model, timeout=timeout)

    def list(
        self,
        *queries: Query,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        url = add_query_params_to_url("/terminal", *queries)
        return self._call("GET", url, response_model=response_model, timeout=timeout)

    def fetch(
        self,
        terminal_id: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._call("GET", f"/terminal/{terminal_id}", response_model=response_model, timeout=timeout)

    def update(
        self,
        terminal_id: str,
        name: str,
        address: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"name": name, "address": address}
        return self._call("PUT", f"/terminal/{terminal_id}", payload, response_model, timeout=timeout)

    def commission(
        self,
        serial_number: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Activate a debug device by linking it to your integration."""
        payload = {"serial_number": serial_number}
        return self._call("POST", "/terminal/commission_device", payload, response_model, timeout=timeout)

    def decommission(
        self,
        serial_number: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Unlink a debug device from your integration."""
        payload = {"serial_number": serial_number}
        return self._call("POST", "/terminal/decommission_device", payload, response_model, timeout=timeout)
