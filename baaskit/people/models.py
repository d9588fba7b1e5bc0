from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional, Union
import json
import logging

import jsonschema

from ..errors import InvalidScope

log = logging.getLogger("baaskit.people")

USERNAME_KEY = "username"

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Scope(str, Enum):
    """Visibility partitions of a user's data. Values are the JSON keys."""
    PRIVATE = "visibleByTheUser"
    FRIEND = "visibleByFriends"
    REGISTERED = "visibleByRegisteredUsers"
    PUBLIC = "visibleByAnonymousUsers"


# ---------------------------------------------------------------------------
# Scoped document
# ---------------------------------------------------------------------------

class ScopedDocument:
    """
    A user-like record: an identifier plus one JSON object per Scope.

    All four scope objects always exist. They are returned by reference, so
    callers edit a scope by mutating the dict that scope() hands back.
    """

    def __init__(
        self,
        identifier: str,
        scopes: Optional[Dict[Scope, Dict[str, Any]]] = None,
    ):
        self._identifier = identifier
        scopes = scopes or {}
        self._scopes: Dict[Scope, Dict[str, Any]] = {
            s: scopes.get(s) if scopes.get(s) is not None else {} for s in Scope
        }

    @property
    def identifier(self) -> str:
        return self._identifier

    def scope(self, kind: Union[Scope, str]) -> Dict[str, Any]:
        try:
            return self._scopes[Scope(kind)]
        except ValueError:
            log.warning("Unknown scope requested: %r", kind)
            raise InvalidScope(f"Unknown scope: {kind!r}") from None

    @property
    def private_data(self) -> Dict[str, Any]:
        return self._scopes[Scope.PRIVATE]

    @property
    def friend_data(self) -> Dict[str, Any]:
        return self._scopes[Scope.FRIEND]

    @property
    def registered_data(self) -> Dict[str, Any]:
        return self._scopes[Scope.REGISTERED]

    @property
    def public_data(self) -> Dict[str, Any]:
        return self._scopes[Scope.PUBLIC]

    # camelCase JSON helpers
    def to_dict(self, include_identifier: bool = True) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if include_identifier:
            out[USERNAME_KEY] = self._identifier
        for s in Scope:
            out[s.value] = self._scopes[s]
        return out

    @classmethod
    def from_dict(cls, identifier: str, data: Dict[str, Any]) -> "ScopedDocument":
        """The identifier always comes from the argument, never from `data`."""
        return cls(identifier, {s: data.get(s.value) for s in Scope})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScopedDocument):
            return NotImplemented
        return self._identifier == other._identifier and self._scopes == other._scopes

    def __repr__(self) -> str:
        return f"ScopedDocument(identifier={self._identifier!r})"


# ---------------------------------------------------------------------------
# JSON Schema
# ---------------------------------------------------------------------------

PERSON_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "https://example.com/person.schema.json",
    "title": "Scoped Person",
    "type": "object",
    "properties": {
        USERNAME_KEY: {"type": "string"},
        **{s.value: {"type": "object"} for s in Scope},
    },
}


def parse_person_json(
    identifier: str,
    payload: Union[str, Dict[str, Any]],
    *,
    validate: bool = True,
) -> ScopedDocument:
    """
    Accept a JSON string or dict and return a ScopedDocument named `identifier`.
    Missing scopes come back as empty objects.
    """
    data = json.loads(payload) if isinstance(payload, str) else payload
    if validate:
        jsonschema.validate(instance=data, schema=PERSON_SCHEMA)
    return ScopedDocument.from_dict(identifier, data)


__all__ = [
    "Scope",
    "ScopedDocument",
    "USERNAME_KEY",
    "PERSON_SCHEMA",
    "parse_person_json",
]
