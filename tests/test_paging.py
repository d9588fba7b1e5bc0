from __future__ import annotations

import httpx

from baaskit import Paging, Param, encode_params
from baaskit.query import params_as_pairs


def test_to_params() -> None:
    assert Paging(2, 25).to_params() == [
        Param("page", "2"),
        Param("recordsPerPage", "25"),
    ]


def test_next_page_keeps_size() -> None:
    nxt = Paging(0, 10).next_page()
    assert (nxt.page, nxt.records) == (1, 10)


def test_dict_keys() -> None:
    assert Paging(3, 15).to_dict() == {"page": 3, "recordsPerPage": 15}
    assert Paging.from_dict({"page": 3, "recordsPerPage": 15}) == Paging(3, 15)


def test_encode_params_keeps_order_and_duplicates() -> None:
    params = [
        Param("where", "a = ? and b = ?"),
        Param("params", "1"),
        Param("params", "2"),
        Param("orderBy", "a ASC"),
    ]
    encoded = encode_params(params)
    assert encoded.startswith("where=")
    assert httpx.QueryParams(encoded).multi_items() == params_as_pairs(params)


def test_encode_params_empty() -> None:
    assert encode_params(None) == ""
    assert encode_params([]) == ""
    assert params_as_pairs(None) == []
