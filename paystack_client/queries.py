"""Query string composition for list/filter endpoints."""

from __future__ import annotations

from typing import NamedTuple


class Query(NamedTuple):
    key: str
    value: str


def with_query(key: str, value: str) -> Query:
    return Query(key=key, value=str(value))


def add_query_params_to_url(url: str, *queries: Query) -> str:
    """
    Append ``queries`` to ``url`` in the order given.

    The first pair is joined with ``?`` unless the url already has a query
    string; every other pair is joined with ``&``. Duplicate keys are kept.
    """
    for query in queries:
        separator = "&" if "?" in url else "?"
        url += f"{separator}{query.key}={query.value}"
    return url
