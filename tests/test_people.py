from __future__ import annotations

import json

import jsonschema
import pytest

from baaskit import InvalidScope, Scope, ScopedDocument, parse_person_json

SCOPE_KEYS = [
    "visibleByTheUser",
    "visibleByFriends",
    "visibleByRegisteredUsers",
    "visibleByAnonymousUsers",
]


def test_scope_wire_names() -> None:
    assert [s.value for s in Scope] == SCOPE_KEYS


def test_new_document_has_four_empty_scopes() -> None:
    doc = ScopedDocument("alice")
    assert doc.identifier == "alice"
    for s in Scope:
        assert doc.scope(s) == {}


def test_scope_returns_mutable_reference() -> None:
    doc = ScopedDocument("alice")
    doc.scope(Scope.FRIEND)["nick"] = "al"
    assert doc.friend_data == {"nick": "al"}
    assert doc.scope("visibleByFriends") is doc.friend_data


@pytest.mark.parametrize("kind", [None, "", "FRIENDS", "visibleByEveryone", 3])
def test_unknown_scope_raises(kind) -> None:
    with pytest.raises(InvalidScope):
        ScopedDocument("alice").scope(kind)


def test_decode_defaults_missing_scopes_and_ignores_body_username() -> None:
    doc = ScopedDocument.from_dict(
        "alice",
        {"username": "mallory", "visibleByAnonymousUsers": {"bio": "hi"}},
    )
    assert doc.identifier == "alice"
    assert doc.public_data == {"bio": "hi"}
    assert doc.private_data == {}
    assert doc.registered_data == {}


def test_encode_always_emits_four_scopes() -> None:
    out = ScopedDocument("alice").to_dict(include_identifier=False)
    assert sorted(out) == sorted(SCOPE_KEYS)
    assert all(v == {} for v in out.values())


def test_encode_includes_username_by_default() -> None:
    out = ScopedDocument("alice").to_dict()
    assert out["username"] == "alice"


def test_round_trip() -> None:
    doc = ScopedDocument("alice")
    doc.scope(Scope.PRIVATE)["email"] = "a@example.com"
    doc.scope(Scope.REGISTERED)["age"] = 30
    again = ScopedDocument.from_dict(doc.identifier, doc.to_dict(True))
    assert again == doc
    assert again.friend_data == {}


def test_parse_person_json_from_string() -> None:
    payload = json.dumps({"visibleByTheUser": {"phone": "123"}})
    doc = parse_person_json("bob", payload)
    assert doc.private_data == {"phone": "123"}
    assert doc.public_data == {}


def test_parse_person_json_rejects_non_object_scope() -> None:
    with pytest.raises(jsonschema.ValidationError):
        parse_person_json("bob", {"visibleByFriends": ["not", "an", "object"]})
