"""
Optional payload composition.

Most endpoints accept far more fields than the required positional
arguments of a client method. Callers pass those extra fields as
optional payloads:

    client.transactions.initialize(
        20000,
        "customer@email.com",
        with_optional_payload("currency", Currency.NGN),
        with_optional_payload("metadata", {"order_id": "ord-1"}),
    )
"""

from __future__ import annotations

from typing import Any, Callable, Dict

OptionalPayload = Callable[[Dict[str, Any]], Dict[str, Any]]


def with_optional_payload(key: str, value: Any) -> OptionalPayload:
    """Return a transformation that sets ``key`` to ``value`` on a payload."""

    def _apply(payload: Dict[str, Any]) -> Dict[str, Any]:
        return {**payload, key: value}

    return _apply


def apply_optional_payloads(base: Dict[str, Any], *optional_payloads: OptionalPayload) -> Dict[str, Any]:
    """
    Apply optional payloads left to right on a copy of ``base``.

    The last transformation touching a key wins.
    """
    payload = dict(base)
    for optional_payload in optional_payloads:
        payload = optional_payload(payload)
    return payload
