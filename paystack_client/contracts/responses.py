from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

from paystack_client.exceptions import ResponseDeserializationError

T = TypeVar("T")


@dataclass(frozen=True)
class Response:
    """Status code and body exactly as Paystack returned them."""

    status_code: int
    data: bytes

    def json(self) -> Any:
        try:
            return json.loads(self.data)
        except ValueError as exc:
            raise ResponseDeserializationError(
                f"Response body is not valid JSON: {exc}",
                status_code=self.status_code,
                raw=self.data,
            ) from exc


class PaystackResponse(BaseModel, Generic[T]):
    """
    Typed view of the envelope Paystack wraps every body in:
    ``{"status": ..., "message": ..., "data": ..., "meta": ...}``.

    ``status_code`` and ``raw`` are filled in from the HTTP response.
    """

    status_code: int = 0
    raw: bytes = b""
    status: bool = False
    message: str = ""
    data: Optional[T] = None
    meta: Optional[Dict[str, Any]] = None
