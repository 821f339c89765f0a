"""
Charges.

Start a payment on a channel of your choice (card, bank, USSD, mobile
money, ...) and feed Paystack whatever it asks for next: PIN, OTP, phone,
birthday or address.
"""

from __future__ import annotations

from typing import Union

from paystack_client.clients.base import (
    USE_CLIENT_DEFAULT,
    ApiResult,
    ResourceClient,
    ResponseModel,
    TimeoutArg,
)
from paystack_client.payloads import OptionalPayload, apply_optional_payloads


class ChargeClient(ResourceClient):
    def create(
        self,
        email: str,
        amount: Union[int, str],
        *optional_payloads: OptionalPayload,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = apply_optional_payloads({"email": email, "amount": amount}, *optional_payloads)
        return self._call("POST", "/charge", payload, response_model, timeout=timeout)

    def submit_pin(
        self,
        pin: str,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"pin": pin, "reference": reference}
        return self._call("POST", "/charge/submit_pin", payload, response_model, timeout=timeout)

    def submit_otp(
        self,
        otp: str,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"otp": otp, "reference": reference}
        return self._call("POST", "/charge/submit_otp", payload, response_model, timeout=timeout)

    def submit_phone(
        self,
        phone: str,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {"phone": phone, "reference": reference}
        return self._call("POST", "/charge/submit_phone", payload, response_model, timeout=timeout)

    def submit_birthday(
        self,
        birthday: str,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """``birthday`` is formatted as YYYY-MM-DD."""
        payload = {"birthday": birthday, "reference": reference}
        return self._call("POST", "/charge/submit_birthday", payload, response_model, timeout=timeout)

    def submit_address(
        self,
        address: str,
        reference: str,
        city: str,
        state: str,
        zip_code: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        payload = {
            "address": address,
            "reference": reference,
            "city": city,
            "state": state,
            "zipcode": zip_code,
        }
        return self._call("POST", "/charge/submit_address", payload, response_model, timeout=timeout)

    def check_pending(
        self,
        reference: str,
        *,
        response_model: ResponseModel = None,
        timeout: TimeoutArg = USE_CLIENT_DEFAULT,
    ) -> ApiResult:
        """Check a charge that previously came back as pending."""
        return self._call("GET", f"/charge/{reference}", response_model=response_model, timeout=timeout)
