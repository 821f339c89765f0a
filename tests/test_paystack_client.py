import inspect

import httpx
import pytest

from paystack_client import (
    ApiResult,
    MissingSecretKeyError,
    PaystackClient,
    PlanClient,
    ResourceClient,
    build_config,
    with_base_url,
    with_http_client,
    with_secret_key,
)

FACADES = [
    "transactions",
    "transaction_splits",
    "terminals",
    "customers",
    "dedicated_virtual_accounts",
    "apple_pay",
    "subaccounts",
    "plans",
    "subscriptions",
    "products",
    "payment_pages",
    "payment_requests",
    "settlements",
    "transfer_recipients",
    "transfers",
    "transfer_control",
    "bulk_charges",
    "integration",
    "charges",
    "disputes",
    "refunds",
    "verification",
    "miscellaneous",
]


def test_every_facade_shares_one_rest_client(paystack):
    for name in FACADES:
        facade = getattr(paystack, name)
        assert isinstance(facade, ResourceClient), name
        assert facade.rest_client is paystack.rest_client, name


def test_config_is_exposed_without_leaking_key(paystack, secret_key):
    assert paystack.config.secret_key == secret_key
    assert secret_key not in repr(paystack.config)


def test_standalone_facade_from_options(http_client, transport, secret_key):
    plans = PlanClient.from_options(with_secret_key(secret_key), with_http_client(http_client))

    response = plans.fetch("abc123")

    assert response.status_code == 200
    assert transport.last.url.path == "/plan/abc123"
    assert plans.rest_client.config.secret_key == secret_key


def test_missing_key_fails_before_sending(http_client, transport):
    paystack = PaystackClient(with_http_client(http_client))

    with pytest.raises(MissingSecretKeyError):
        paystack.transactions.verify("ref-1")

    assert transport.requests == []


def test_context_manager_closes_owned_transport():
    with PaystackClient(with_secret_key("sk_test_a")) as paystack:
        http_client = paystack.rest_client._http_client
        assert not http_client.is_closed

    assert http_client.is_closed


def test_context_manager_leaves_caller_transport_open(http_client):
    with PaystackClient(with_secret_key("sk_test_a"), with_http_client(http_client)):
        pass

    assert not http_client.is_closed


def test_from_env_then_options(monkeypatch, http_client, transport):
    monkeypatch.setenv("PAYSTACK_SECRET_KEY", "sk_test_env")
    monkeypatch.setenv("PAYSTACK_BASE_URL", "http://localhost:9000")

    paystack = PaystackClient.from_env(with_http_client(http_client), load_env_file=False)
    paystack.miscellaneous.banks()

    assert str(transport.last.url) == "http://localhost:9000/bank"
    assert transport.last.headers["Authorization"] == "Bearer sk_test_env"


def test_options_override_explicit_config(http_client, transport):
    base = build_config(with_secret_key("sk_test_a"))

    paystack = PaystackClient(with_base_url("http://localhost:7000"), with_http_client(http_client), config=base)
    paystack.transfer_control.balance()

    assert str(transport.last.url) == "http://localhost:7000/balance"
    assert transport.last.headers["Authorization"] == "Bearer sk_test_a"


def test_http_client_timeouts_are_callers_choice(transport):
    http_client = httpx.Client(transport=httpx.MockTransport(transport), timeout=2.5)
    paystack = PaystackClient(with_secret_key("sk_test_a"), with_http_client(http_client))

    paystack.refunds.list()

    assert transport.last.extensions["timeout"]["read"] == 2.5
    http_client.close()


def test_facade_call_carries_its_own_timeout(paystack, transport):
    paystack.plans.fetch("abc123", timeout=httpx.Timeout(2.0, connect=0.5))

    assert transport.last.extensions["timeout"] == {"connect": 0.5, "read": 2.0, "write": 2.0, "pool": 2.0}


def _public_methods(facade):
    for name, member in inspect.getmembers(type(facade), inspect.isfunction):
        if not name.startswith("_") and name != "from_options":
            yield name, member


@pytest.mark.parametrize("attribute", FACADES)
def test_facade_methods_accept_timeout_and_declare_result(paystack, attribute):
    methods = list(_public_methods(getattr(paystack, attribute)))

    assert methods
    for name, method in methods:
        signature = inspect.signature(method)
        timeout = signature.parameters["timeout"]
        assert timeout.kind is inspect.Parameter.KEYWORD_ONLY, name
        assert timeout.default is httpx.USE_CLIENT_DEFAULT, name
        assert signature.return_annotation in ("ApiResult", ApiResult), name
