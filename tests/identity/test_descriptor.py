from __future__ import annotations

import pytest

from time_ledger.identity.descriptor import (
    EmptyDescriptor,
    LiteralDescriptor,
    StructuredDescriptor,
    candidate_name,
    embedded_refs,
    extract_name,
    parse_descriptor,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, EmptyDescriptor()),
        ("", EmptyDescriptor()),
        ("   ", EmptyDescriptor()),
        ("null", EmptyDescriptor()),
        ("[]", EmptyDescriptor()),
        ("Unparseable text", LiteralDescriptor("Unparseable text")),
        ("  Ola Nordmann ", LiteralDescriptor("Ola Nordmann")),
        ('"Kari"', EmptyDescriptor()),
        ("42", EmptyDescriptor()),
        ("true", EmptyDescriptor()),
        (42, EmptyDescriptor()),
        (True, EmptyDescriptor()),
        ("[Jane Doe]", LiteralDescriptor("[Jane Doe]")),
        ("  (Jane Doe)\n", LiteralDescriptor("(Jane Doe)")),
        ('{"name": "Jane Doe"}', StructuredDescriptor({"name": "Jane Doe"})),
        ('[{"name": "Jane Doe"}]', StructuredDescriptor({"name": "Jane Doe"})),
        ({"name": "Jane Doe"}, StructuredDescriptor({"name": "Jane Doe"})),
        ([1, {"id": 3}], StructuredDescriptor({"id": 3})),
    ],
)
def test_parse_descriptor_variants(raw, expected):
    assert parse_descriptor(raw) == expected


def test_broken_json_object_becomes_literal_text():
    descriptor = parse_descriptor('{"name": "Jane')
    assert descriptor == LiteralDescriptor('{"name": "Jane')


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"name": "Jane Doe", "username": "jd"}, "Jane Doe"),
        ({"username": "jd", "full_name": "Jane Doe"}, "jd"),
        ({"first_name": "Jane", "last_name": "Doe"}, "Jane Doe"),
        ({"firstName": "Jane", "lastName": "Doe"}, "Jane Doe"),
        ({"first_name": "Jane"}, None),
        ({"user": {"display_name": "Jane Doe"}}, "Jane Doe"),
        ({"email": "jane.doe@example.com"}, "jane.doe"),
        ({"name": "   ", "email": "x@y.no"}, "x"),
        ({"name": True}, "true"),
        ({"name": 0, "username": "jd"}, "jd"),
        ({"name": False}, None),
        ({}, None),
    ],
)
def test_extract_name_priority(data, expected):
    assert extract_name(data) == expected


def test_extract_name_follows_nested_users():
    data: dict = {}
    node = data
    for _ in range(20):
        node["user"] = {}
        node = node["user"]
    node["name"] = "Deep Name"

    assert extract_name(data) == "Deep Name"


def test_extract_name_ignores_pathologically_deep_nesting():
    data: dict = {}
    node = data
    for _ in range(150):
        node["user"] = {}
        node = node["user"]
    node["name"] = "Too deep"

    assert extract_name(data) is None


def test_embedded_refs_collects_top_level_then_nested():
    assert embedded_refs({"employeeId": 5, "user": {"id": "7"}}) == ["5", "7"]


def test_bare_id_only_counts_inside_nested_user():
    assert embedded_refs({"id": 9, "name": "Jane Doe"}) == []
    assert embedded_refs({"user": {"id": 9}}) == ["9"]
    assert embedded_refs({"user_id": True}) == []


def test_candidate_name_per_variant():
    assert candidate_name(StructuredDescriptor({"name": "A"})) == "A"
    assert candidate_name(LiteralDescriptor("B")) == "B"
    assert candidate_name(EmptyDescriptor()) is None
