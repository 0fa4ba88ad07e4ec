"""Legacy employee descriptors (he_time_logs.user_data).

Older rows identify the employee with a JSON object (stored as jsonb or as
text) or with plain free text. parse_descriptor turns any of these into one
of three variants; it never raises.

Only objects carry usable fields. Text that does not decode as JSON is kept
as a literal name, and JSON that decodes to a bare scalar names nobody.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

# Nested `user` objects deeper than this are ignored.
_MAX_DEPTH = 100

_NAME_FIELDS = ("name", "user_name", "username", "employee_name", "full_name", "display_name")
_NAME_PAIRS = (("first_name", "last_name"), ("firstName", "lastName"))
_REF_FIELDS = ("employee_id", "employeeId", "user_id", "userId")
# A bare `id` only names the employee inside a nested `user` object.
_NESTED_REF_FIELDS = _REF_FIELDS + ("id",)

_UNDECODABLE = object()


@dataclass(frozen=True)
class StructuredDescriptor:
    data: Mapping[str, Any]


@dataclass(frozen=True)
class LiteralDescriptor:
    text: str


@dataclass(frozen=True)
class EmptyDescriptor:
    pass


Descriptor = Union[StructuredDescriptor, LiteralDescriptor, EmptyDescriptor]


def parse_descriptor(raw: Any) -> Descriptor:
    if raw is None:
        return EmptyDescriptor()
    if not isinstance(raw, str):
        return _from_json(raw)

    text = raw.strip()
    if not text:
        return EmptyDescriptor()

    decoded = _decode(text)
    if decoded is _UNDECODABLE:
        return LiteralDescriptor(text)
    return _from_json(decoded)


def _decode(text: str) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return _UNDECODABLE


def _from_json(value: Any) -> Descriptor:
    if isinstance(value, Mapping):
        return StructuredDescriptor(value)
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, Mapping):
                return StructuredDescriptor(item)
    return EmptyDescriptor()


def _text(value: Any) -> Optional[str]:
    """Field value as display text; empty, zero and false values count as missing."""

    if not value or not isinstance(value, (str, int, float)):
        return None
    if isinstance(value, bool):
        return "true"
    text = str(value).strip()
    return text or None


def _ref(value: Any) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    ref = str(value).strip()
    return ref or None


def extract_name(data: Mapping[str, Any], _depth: int = 0) -> Optional[str]:
    """First usable name in a descriptor object, in field priority order."""

    for field in _NAME_FIELDS:
        name = _text(data.get(field))
        if name:
            return name

    for first_field, last_field in _NAME_PAIRS:
        first, last = _text(data.get(first_field)), _text(data.get(last_field))
        if first and last:
            return f"{first} {last}"

    nested = data.get("user")
    if isinstance(nested, Mapping) and _depth < _MAX_DEPTH:
        name = extract_name(nested, _depth + 1)
        if name:
            return name

    email = _text(data.get("email"))
    if email:
        local_part = email.split("@")[0].strip()
        if local_part:
            return local_part

    return None


def embedded_refs(data: Mapping[str, Any], _depth: int = 0) -> list[str]:
    """Employee reference candidates carried inside a descriptor object."""

    fields = _NESTED_REF_FIELDS if _depth else _REF_FIELDS
    refs = [ref for ref in (_ref(data.get(f)) for f in fields) if ref]
    nested = data.get("user")
    if isinstance(nested, Mapping) and _depth < _MAX_DEPTH:
        refs.extend(embedded_refs(nested, _depth + 1))
    return refs


def candidate_name(descriptor: Descriptor) -> Optional[str]:
    if isinstance(descriptor, StructuredDescriptor):
        return extract_name(descriptor.data)
    if isinstance(descriptor, LiteralDescriptor):
        return descriptor.text
    return None
