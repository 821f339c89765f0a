"""
Errors raised by the Paystack client.

Only failures to complete a request are errors. A request that reached
Paystack and came back with a 4xx/5xx status is returned as a normal
Response so the caller can inspect the body.
"""

from __future__ import annotations

from typing import Any, Optional


class PaystackError(Exception):
    """Base class for every error raised by this package."""


class MissingSecretKeyError(PaystackError):
    def __init__(self, message: str = "Paystack secret key was not provided") -> None:
        super().__init__(message)


class PayloadSerializationError(PaystackError, ValueError):
    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class TransportError(PaystackError):
    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class ResponseDeserializationError(PaystackError, ValueError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, raw: bytes = b"") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.raw = raw
