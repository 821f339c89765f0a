from __future__ import annotations

from typing import Any, Optional, Type, Union

from httpx import USE_CLIENT_DEFAULT
from pydantic import BaseModel

from paystack_client.config import ClientOption, build_config
from paystack_client.contracts.responses import Response
from paystack_client.rest_client import RestClient, TimeoutArg

ResponseModel = Optional[Type[BaseModel]]
# Response when no response_model is given, otherwise an instance of it
ApiResult = Union[Response, BaseModel]

__all__ = ["USE_CLIENT_DEFAULT", "ApiResult", "ResourceClient", "ResponseModel", "TimeoutArg"]


class ResourceClient:
    """Base for every resource client: holds a reference to the shared RestClient."""

    def __init__(self, rest_client: RestClient) -> None:
        self._rest = rest_client

    @classmethod
    def from_options(cls, *options: ClientOption):
        """Build a standalone client with its own RestClient."""
        return cls(RestClient(build_config(*options)))

    @property
    def rest_client(self) -> RestClient:
        return self._rest

    def _call(
        self,
        method: str,
        path: str,
        payload: Any = None,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        return self._rest.api_call(method, path, payload, response_model=response_model, timeout=timeout)
