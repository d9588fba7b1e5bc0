"""
Request building for baaskit.

This module turns compiled filters and scoped documents into httpx requests.
"""

from ..query import Param, encode_params
from .factory import RequestFactory, APPCODE_HEADER

__all__ = [
    "Param",
    "encode_params",
    "RequestFactory",
    "APPCODE_HEADER",
]
