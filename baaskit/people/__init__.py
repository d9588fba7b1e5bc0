"""
User data model for baaskit.

This module provides the four visibility scopes and the scoped document that
holds one JSON object per scope.
"""

from .models import (
    Scope,
    ScopedDocument,
    USERNAME_KEY,
    PERSON_SCHEMA,
    parse_person_json,
)

__all__ = [
    "Scope",
    "ScopedDocument",
    "USERNAME_KEY",
    "PERSON_SCHEMA",
    "parse_person_json",
]
