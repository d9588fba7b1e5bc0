from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
import json
import logging

import jsonschema

from ..errors import InvalidFilterState
from .paging import Paging
from .params import Param

log = logging.getLogger("baaskit.query")


def _stringify(value: Any) -> str:
    return "null" if value is None else str(value)


def _direction(order: str, asc: bool) -> str:
    return order + (" ASC" if asc else " DESC")


_UNSET = object()


# ---------------------------------------------------------------------------
# Filter builder
# ---------------------------------------------------------------------------

@dataclass
class QueryFilter:
    """
    A query filter for batch requests on collections, users and files.

    Holds an optional where condition (with positional `?` params), an
    optional sort order and optional paging. Every setter returns the same
    instance so calls can be chained; compile() turns the state into the
    ordered request params.

    Where conditions are passed verbatim to the server database, so their
    syntax is the OrientDB SQL `WHERE` syntax.
    """
    where_clause: Optional[str] = None
    params: Optional[List[str]] = None
    order_by: Optional[str] = None
    pagination: Optional[Paging] = None
    # Tag for the ANY sentinel; only set by _unrestricted(). Setters leave a
    # tagged filter untouched and compile() returns None for it.
    unrestricted: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.params:
            self.params = [_stringify(p) for p in self.params]
        else:
            self.params = None
        if self.pagination is not None:
            self.pagination = Paging(self.pagination.page, self.pagination.records)

    # -- factories ----------------------------------------------------------

    @classmethod
    def _unrestricted(cls) -> "QueryFilter":
        f = cls()
        f.unrestricted = True
        return f

    @classmethod
    def where(cls, clause: Optional[str], *args: Any) -> "QueryFilter":
        """
        New filter with the given where condition. `?` placeholders in the
        clause are filled, in order, from `args`.
        """
        return cls().set_where(clause, *args)

    @classmethod
    def sort(cls, order: str, asc: bool) -> "QueryFilter":
        return cls().set_order_by(_direction(order, asc))

    @classmethod
    def paging(cls, order: str, asc: bool, page: int, records: int) -> "QueryFilter":
        """New filter sorted by `order` and returning `records` entities of `page`."""
        return cls().set_order_by(_direction(order, asc)).set_paging(page, records)

    # -- setters ------------------------------------------------------------

    def set_where(self, clause: Optional[str], *args: Any) -> "QueryFilter":
        """
        Replace the where condition and its params. A None clause removes both.
        Each arg is stored as str(arg); None is stored as "null".
        """
        if self.unrestricted:
            return self
        if clause is None:
            self.where_clause = None
            self.params = None
            return self
        self.where_clause = str(clause)
        self.params = [_stringify(a) for a in args] or None
        return self

    def set_order_by(self, name: Optional[str]) -> "QueryFilter":
        if self.unrestricted:
            return self
        self.order_by = name
        return self

    def set_paging(
        self,
        page: int,
        records: int,
        *,
        order_by: Any = _UNSET,
    ) -> "QueryFilter":
        """
        Configure pagination.

        Without `order_by` the paging is created only if none is set yet;
        later calls keep the first values until clear_paging().
        With `order_by` (None included) the order is overwritten and
        page/records are always refreshed.
        """
        if self.unrestricted:
            return self
        if order_by is _UNSET:
            if self.pagination is None:
                self.pagination = Paging(page, records)
            return self

        self.order_by = order_by
        if self.pagination is None:
            self.pagination = Paging(page, records)
        self.pagination.page = page
        self.pagination.records = records
        return self

    def clear_paging(self) -> "QueryFilter":
        if self.unrestricted:
            return self
        self.pagination = None
        return self

    # -- compilation --------------------------------------------------------

    def _validate(self) -> None:
        if self.pagination is not None and self.order_by is None:
            log.warning("Paging %s set without an order", self.pagination)
            raise InvalidFilterState("paging requires order by")

    def compile(self) -> Optional[List[Param]]:
        """
        Returns the request params in wire order:
        where, params..., orderBy, page, recordsPerPage.
        Returns None when the filter imposes no restriction.
        """
        if self.unrestricted:
            return None
        self._validate()

        out: List[Param] = []
        if self.where_clause is not None:
            out.append(Param("where", self.where_clause))
            for p in self.params or []:
                out.append(Param("params", p))
        if self.order_by is not None:
            out.append(Param("orderBy", self.order_by))
        if self.pagination is not None:
            out.extend(self.pagination.to_params())

        if not out:
            return None
        log.debug("Compiled filter into %d params", len(out))
        return out

    def copy(self) -> "QueryFilter":
        """Independent configured copy. Copying ANY yields an empty filter."""
        if self.unrestricted:
            return QueryFilter()
        return QueryFilter(
            where_clause=self.where_clause,
            params=list(self.params) if self.params else None,
            order_by=self.order_by,
            pagination=self.pagination,
        )

    # camelCase JSON helpers (same key names as the wire params)
    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.unrestricted:
            return out
        if self.where_clause is not None:
            out["where"] = self.where_clause
            if self.params:
                out["params"] = list(self.params)
        if self.order_by is not None:
            out["orderBy"] = self.order_by
        if self.pagination is not None:
            out.update(self.pagination.to_dict())
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QueryFilter":
        pagination = None
        if "recordsPerPage" in data:
            pagination = Paging.from_dict(data)
        return cls(
            where_clause=data.get("where"),
            params=list(data.get("params", [])),
            order_by=data.get("orderBy"),
            pagination=pagination,
        )


ANY = QueryFilter._unrestricted()
"""A filter that does not apply any restriction to the request."""


# ---------------------------------------------------------------------------
# JSON Schema
# ---------------------------------------------------------------------------

FILTER_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.com/filter.schema.json",
    "title": "Query Filter",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "where": {"type": "string"},
        "params": {"type": "array", "items": {"type": "string"}},
        "orderBy": {"type": "string", "minLength": 1},
        "page": {"type": "integer", "minimum": 0},
        "recordsPerPage": {"type": "integer", "minimum": 1},
    },
    # params only make sense with a where condition; paging comes as a pair
    "dependentRequired": {
        "params": ["where"],
        "page": ["recordsPerPage"],
        "recordsPerPage": ["page"],
    },
}


def parse_filter_json(
    payload: Union[str, Dict[str, Any]],
    *,
    validate: bool = True,
) -> QueryFilter:
    """
    Accept a JSON string or dict and return a QueryFilter.
    The paging/order rule is not checked here; compile() enforces it.
    """
    data = json.loads(payload) if isinstance(payload, str) else payload
    if validate:
        jsonschema.validate(instance=data, schema=FILTER_SCHEMA)
    return QueryFilter.from_dict(data)


__all__ = [
    "QueryFilter",
    "ANY",
    "FILTER_SCHEMA",
    "parse_filter_json",
]
