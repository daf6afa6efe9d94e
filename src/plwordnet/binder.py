"""Declarative attribute binding for plWordNet XML elements.

Each entity kind is described by a table of :class:`Field` entries mapping an
XML attribute to a constructor argument. :func:`bind` applies the same policy
to every table: a missing attribute takes the field's default, a present
attribute that fails to coerce raises
:class:`~plwordnet.exceptions.InvalidAttributeValueError`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple, TypeVar

from plwordnet.exceptions import InvalidAttributeValueError

_T = TypeVar("_T")

_UINT_RE = re.compile(r"\+?[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")

_UINT_MAX = 2**64 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


# ---------------------------------------------------------------------------
# Coercions
# ---------------------------------------------------------------------------

def as_text(raw: str) -> str:
    return raw


def as_uint(raw: str) -> int:
    """Parse an unsigned 64-bit id."""
    if not _UINT_RE.fullmatch(raw):
        raise ValueError(f"not an unsigned integer: {raw!r}")
    value = int(raw)
    if value > _UINT_MAX:
        raise ValueError(f"out of range: {raw!r}")
    return value


def as_int(raw: str) -> int:
    """Parse a signed 32-bit integer."""
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"not an integer: {raw!r}")
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"out of range: {raw!r}")
    return value


def as_bool(raw: str) -> bool:
    # Only the exact literal "true" is truthy; nothing fails.
    return raw == "true"


class Field(NamedTuple):
    """One row of a binding table."""

    attribute: str
    name: str
    coerce: Callable[[str], Any] = as_text
    default: Any = ""


def text(attribute: str, name: str | None = None) -> Field:
    return Field(attribute, name or attribute, as_text, "")


def uint(attribute: str, name: str | None = None) -> Field:
    return Field(attribute, name or attribute, as_uint, 0)


def int32(attribute: str, name: str | None = None) -> Field:
    return Field(attribute, name or attribute, as_int, 0)


def flag(attribute: str, name: str | None = None) -> Field:
    return Field(attribute, name or attribute, as_bool, False)


# ---------------------------------------------------------------------------
# Binding tables
# ---------------------------------------------------------------------------

ROOT_FIELDS: tuple[Field, ...] = (
    text("owner"),
    text("date"),
    text("version"),
)

LEXICAL_UNIT_FIELDS: tuple[Field, ...] = (
    uint("id"),
    text("name"),
    text("pos"),
    int32("tagcount"),
    text("domain"),
    text("desc"),
    text("workstate"),
    text("source"),
    int32("variant"),
)

SYNSET_FIELDS: tuple[Field, ...] = (
    uint("id"),
    text("workstate"),
    int32("split"),
    text("owner"),
    text("definition"),
    text("desc"),
    flag("abstract"),
)

RELATION_TYPE_FIELDS: tuple[Field, ...] = (
    uint("id"),
    text("type", "type_"),
    uint("reverse"),
    text("name"),
    text("description"),
    text("posstr"),
    text("display"),
    text("shortcut"),
    flag("autoreverse"),
    text("pwn"),
)

RELATION_TYPE_TEST_FIELDS: tuple[Field, ...] = (
    text("text"),
    text("pos"),
)

RELATION_FIELDS: tuple[Field, ...] = (
    uint("parent"),
    uint("child"),
    uint("relation"),
    flag("valid"),
    text("owner"),
)


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------

def bind_fields(
    tag: str,
    attributes: Mapping[str, str],
    fields: tuple[Field, ...],
) -> dict[str, Any]:
    """Return constructor keyword arguments for *fields* read from *attributes*."""
    values: dict[str, Any] = {}
    for field in fields:
        raw = attributes.get(field.attribute)
        if raw is None:
            values[field.name] = field.default
            continue
        try:
            values[field.name] = field.coerce(raw)
        except ValueError as e:
            raise InvalidAttributeValueError(tag, field.name, raw) from e
    return values


def bind(
    cls: Callable[..., _T],
    tag: str,
    attributes: Mapping[str, str],
    fields: tuple[Field, ...],
    **extra: Any,
) -> _T:
    """Build *cls* from *attributes*; *extra* supplies non-attribute fields.

    Collection-valued fields are passed through *extra* (always empty at
    bind time) and filled later by the parser.
    """
    values = bind_fields(tag, attributes, fields)
    values.update(extra)
    return cls(**values)
