from __future__ import annotations
from typing import List, NamedTuple, Optional, Sequence

import httpx


class Param(NamedTuple):
    """One compiled key/value pair, appended to the request query string as-is."""
    name: str
    value: str


def encode_params(params: Optional[Sequence[Param]]) -> str:
    """
    Render compiled params as a query string.
    Order and repeated keys (several `params=`) are preserved.
    """
    if not params:
        return ""
    return str(httpx.QueryParams([(p.name, p.value) for p in params]))


def params_as_pairs(params: Optional[Sequence[Param]]) -> List[tuple]:
    return [(p.name, p.value) for p in params or []]


__all__ = ["Param", "encode_params", "params_as_pairs"]
