"""
baaskit: query filters and scoped user data for a BaasBox client.
"""

from .errors import BaasError, InvalidFilterState, InvalidScope
from .query import ANY, Paging, Param, QueryFilter, encode_params, parse_filter_json
from .people import Scope, ScopedDocument, parse_person_json
from .config import ClientConfig
from .request import RequestFactory

__version__ = "0.1.0"

__all__ = [
    "BaasError",
    "InvalidFilterState",
    "InvalidScope",
    "ANY",
    "Paging",
    "Param",
    "QueryFilter",
    "encode_params",
    "parse_filter_json",
    "Scope",
    "ScopedDocument",
    "parse_person_json",
    "ClientConfig",
    "RequestFactory",
]
