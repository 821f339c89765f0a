import pytest

from paystack_client import (
    Query,
    add_query_params_to_url,
    apply_optional_payloads,
    with_optional_payload,
    with_query,
)


def test_optional_payloads_apply_after_required_fields():
    payload = apply_optional_payloads(
        {"amount": 20000, "email": "ada@example.com"},
        with_optional_payload("currency", "NGN"),
        with_optional_payload("reference", "ref-1"),
    )

    assert payload == {"amount": 20000, "email": "ada@example.com", "currency": "NGN", "reference": "ref-1"}


def test_last_optional_payload_for_a_key_wins():
    payload = apply_optional_payloads(
        {"amount": 20000},
        with_optional_payload("currency", "NGN"),
        with_optional_payload("currency", "GHS"),
        with_optional_payload("amount", 50000),
    )

    assert payload == {"amount": 50000, "currency": "GHS"}


def test_optional_payloads_match_left_to_right_dict_update():
    base = {"name": "Gold", "amount": 1}
    pairs = [("amount", 2), ("interval", "monthly"), ("name", "Silver"), ("amount", 3)]

    expected = dict(base)
    for key, value in pairs:
        expected.update({key: value})

    payload = apply_optional_payloads(base, *(with_optional_payload(k, v) for k, v in pairs))

    assert payload == expected


def test_base_payload_is_not_mutated():
    base = {"amount": 1}

    apply_optional_payloads(base, with_optional_payload("currency", "NGN"))

    assert base == {"amount": 1}


def test_no_optional_payloads_returns_copy_of_base():
    base = {"name": "Gold"}

    payload = apply_optional_payloads(base)

    assert payload == base
    assert payload is not base


def test_with_query_builds_pair():
    assert with_query("perPage", "50") == Query(key="perPage", value="50")
    assert with_query("page", 2) == Query("page", "2")


@pytest.mark.parametrize(
    "url, queries, expected",
    [
        ("/transaction", [], "/transaction"),
        ("/transaction", [Query("perPage", "20")], "/transaction?perPage=20"),
        (
            "/transaction",
            [Query("perPage", "20"), Query("page", "2"), Query("status", "success")],
            "/transaction?perPage=20&page=2&status=success",
        ),
        ("/bank?country=nigeria", [Query("perPage", "20")], "/bank?country=nigeria&perPage=20"),
        ("/bank?", [Query("a", "1"), Query("b", "2")], "/bank?&a=1&b=2"),
    ],
)
def test_add_query_params_to_url(url, queries, expected):
    assert add_query_params_to_url(url, *queries) == expected


def test_duplicate_query_keys_are_kept_in_order():
    url = add_query_params_to_url("/plan", with_query("status", "active"), with_query("status", "inactive"))

    assert url == "/plan?status=active&status=inactive"
