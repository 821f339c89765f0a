"""
REST client shared by every Paystack resource client.

This is the ONLY place where HTTP calls are made. Resource clients build a
path and a payload and hand them to RestClient.api_call, which:
- encodes the payload as JSON
- sets the Authorization / User-Agent / Content-Type headers
- sends the request through the configured httpx.Client
- returns the status code and body untouched, or parses them into a
  caller-supplied pydantic model

HTTP error statuses (4xx/5xx) are returned, not raised.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from paystack_client.config import ClientConfig
from paystack_client.contracts.responses import Response
from paystack_client.exceptions import (
    MissingSecretKeyError,
    PayloadSerializationError,
    ResponseDeserializationError,
    TransportError,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"
USER_AGENT = f"paystack-client/{VERSION}"

ModelT = TypeVar("ModelT", bound=BaseModel)

# float seconds, httpx.Timeout, None for no deadline, or httpx.USE_CLIENT_DEFAULT
TimeoutArg = Any


class RestClient:
    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or ClientConfig()
        self._owns_http_client = self.config.http_client is None
        self._http_client = self.config.http_client or httpx.Client(timeout=None)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def api_call(
        self,
        method: str,
        path: str,
        payload: Any = None,
        response_model: Optional[Type[ModelT]] = None,
        *,
        timeout: TimeoutArg = httpx.USE_CLIENT_DEFAULT,
    ) -> Union[Response, ModelT]:
        """
        Send one request to Paystack.

        ``timeout`` applies to this call only; by default the httpx.Client's
        own timeout is used.
        """
        content = self._encode_payload(payload) if payload is not None else None
        url = f"{self.config.base_url}{path}"
        headers = self._headers()

        logger.debug("Paystack request %s %s", method, path)
        try:
            http_response = self._http_client.request(
                method, url, content=content, headers=headers, timeout=timeout
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Paystack request %s %s failed: %s", method, path, exc)
            raise TransportError(
                f"Request to Paystack failed: {exc}",
                method=method,
                url=url,
            ) from exc

        response = Response(status_code=http_response.status_code, data=http_response.content)
        logger.debug("Paystack response %s %s -> %s", method, path, response.status_code)

        if response_model is None:
            return response
        return self._build_model(response_model, response)

    def _headers(self) -> Dict[str, str]:
        if not self.config.secret_key:
            raise MissingSecretKeyError()
        return {
            "Authorization": f"Bearer {self.config.secret_key}",
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _encode_payload(payload: Any) -> bytes:
        try:
            return json.dumps(payload).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise PayloadSerializationError(
                f"Payload could not be encoded as JSON: {exc}",
                payload=payload,
            ) from exc

    @staticmethod
    def _build_model(model: Type[ModelT], response: Response) -> ModelT:
        body = response.json()
        if isinstance(body, dict):
            # only fields the model declares
            extras = {"status_code": response.status_code, "raw": response.data}
            body = {**body, **{k: v for k, v in extras.items() if k in model.model_fields}}
        try:
            return model.model_validate(body)
        except ValidationError as exc:
            logger.warning(
                "Paystack response (status %s) does not match %s",
                response.status_code,
                model.__name__,
            )
            raise ResponseDeserializationError(
                f"Response body does not match {model.__name__}: {exc}",
                status_code=response.status_code,
                raw=response.data,
            ) from exc
