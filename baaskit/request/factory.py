from __future__ import annotations
from typing import Any, Dict, Optional
import logging

import httpx

from ..config import ClientConfig
from ..people import ScopedDocument
from ..query import ANY, QueryFilter, params_as_pairs

log = logging.getLogger("baaskit.request")

APPCODE_HEADER = "X-BAASBOX-APPCODE"


class RequestFactory:
    """
    Builds httpx.Request objects for the backend. Compiled filter params are
    appended to the URL in the order compile() emits them.
    Requests are only built here; sending them is up to the caller.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig.from_env()

    def _url(self, endpoint: str) -> str:
        return self.config.base_url.rstrip("/") + "/" + endpoint.lstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {APPCODE_HEADER: self.config.app_code}

    def _extensions(self) -> Dict[str, Any]:
        return {"timeout": httpx.Timeout(self.config.timeout).as_dict()}

    def get(self, endpoint: str, query: QueryFilter = ANY) -> httpx.Request:
        params = query.compile()
        log.debug("GET %s with %d params", endpoint, len(params or []))
        return httpx.Request(
            "GET",
            self._url(endpoint),
            params=params_as_pairs(params) or None,
            headers=self._headers(),
            extensions=self._extensions(),
        )

    def post_json(self, endpoint: str, body: Dict[str, Any]) -> httpx.Request:
        log.debug("POST %s", endpoint)
        return httpx.Request(
            "POST",
            self._url(endpoint),
            json=body,
            headers=self._headers(),
            extensions=self._extensions(),
        )

    # -- endpoints ------------------------------------------------------------

    def documents(self, collection: str, query: QueryFilter = ANY) -> httpx.Request:
        return self.get(f"document/{collection}", query)

    def count(self, collection: str, query: QueryFilter = ANY) -> httpx.Request:
        return self.get(f"document/{collection}/count", query)

    def users(self, query: QueryFilter = ANY) -> httpx.Request:
        return self.get("users", query)

    def files(self, query: QueryFilter = ANY) -> httpx.Request:
        return self.get("file/details", query)

    def signup(self, person: ScopedDocument, password: str) -> httpx.Request:
        body = person.to_dict(include_identifier=True)
        body["password"] = password
        return self.post_json("user", body)

    def default_paging(self, order: str) -> QueryFilter:
        """First page, ascending on `order`, sized by the configured default."""
        return QueryFilter.paging(order, True, 0, self.config.default_records_per_page)


__all__ = ["RequestFactory", "APPCODE_HEADER"]
