"""
Query filters for baaskit.

This module provides the filter builder, its paging value type and the
compiled request params.
"""

from .params import Param, encode_params, params_as_pairs
from .paging import Paging
from .filter import (
    QueryFilter,
    ANY,
    FILTER_SCHEMA,
    parse_filter_json,
)

__all__ = [
    "Param",
    "encode_params",
    "params_as_pairs",
    "Paging",
    "QueryFilter",
    "ANY",
    "FILTER_SCHEMA",
    "parse_filter_json",
]
