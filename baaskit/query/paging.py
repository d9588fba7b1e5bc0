from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List

from .params import Param


@dataclass
class Paging:
    """
    Page number plus page size. Pages are numbered the way the server
    numbers them (the first page is 0).

    Mutable on purpose: QueryFilter.set_paging(..., order_by=...) refreshes
    the counters of an existing instance in place.
    """
    page: int
    records: int

    def to_params(self) -> List[Param]:
        return [
            Param("page", str(self.page)),
            Param("recordsPerPage", str(self.records)),
        ]

    def next_page(self) -> "Paging":
        return Paging(self.page + 1, self.records)

    # camelCase JSON helpers
    def to_dict(self) -> Dict[str, Any]:
        return {"page": self.page, "recordsPerPage": self.records}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Paging":
        return cls(
            page=int(data.get("page", 0) or 0),
            records=int(data["recordsPerPage"]),
        )


__all__ = ["Paging"]
