"""Composite predicates: equality, emptiness, hashes, primitives and encodings."""

from __future__ import annotations

import functools
import re
from typing import Callable, Final

from .arrays import is_array
from .kinds import epoch_seconds, is_function, is_string
from .values import (
    Tag,
    ValueKind,
    kind_of,
    length_of,
    own_items,
    prop,
    scalar,
    tag_of,
    truthy,
)


_BASE64_RE: Final[re.Pattern[str]] = re.compile(
    r"([A-Za-z0-9+/]{4})*([A-Za-z0-9+/]{4}|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{2}==)"
)
_HEX_RE: Final[re.Pattern[str]] = re.compile(r"[A-Fa-f0-9]+")

_VALUE_TAGS: Final[frozenset[Tag]] = frozenset({Tag.BOOLEAN, Tag.NUMBER, Tag.BIGINT, Tag.STRING})
_NON_HOST_KINDS: Final[frozenset[ValueKind]] = frozenset(
    {ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING, ValueKind.UNDEFINED}
)

_Active = set[tuple[int, int]]


def is_empty(value: object) -> bool:
    """Length zero for arrays, arguments and strings; no own keys for objects.

    Any other value is empty when it is falsy.
    """
    tag = tag_of(value)
    if tag in (Tag.ARRAY, Tag.ARGUMENTS, Tag.STRING):
        return length_of(value) == 0
    if tag is Tag.OBJECT:
        items = own_items(value)
        return items is None or len(items) == 0
    return not truthy(value)


def _strictly_equal(value: object, other: object) -> bool:
    if value is other:
        return True
    tag = tag_of(value)
    if tag not in _VALUE_TAGS or tag is not tag_of(other):
        return False
    return bool(scalar(value) == scalar(other))


def _prototype(fn: object) -> object:
    fn = getattr(fn, "__func__", fn)
    while isinstance(fn, functools.partial):
        fn = fn.func
    return fn


def _guarded(
    compare: Callable[[object, object, _Active], bool],
    value: object,
    other: object,
    active: _Active,
) -> bool:
    pair = (id(value), id(other))
    if pair in active:
        return True
    active.add(pair)
    try:
        return compare(value, other, active)
    finally:
        active.discard(pair)


def _equal_objects(value: object, other: object, active: _Active) -> bool:
    items = own_items(value)
    other_items = own_items(other)
    if items is None or other_items is None:
        return bool(value == other)
    if set(items.keys()) != set(other_items.keys()):
        return False
    return all(_equal(items[key], other_items[key], active) for key in items)


def _equal_arrays(value, other, active: _Active) -> bool:
    index = len(value)
    if index != len(other):
        return False
    while index > 0:
        index -= 1
        if not _equal(value[index], other[index], active):
            return False
    return True


def _equal(value: object, other: object, active: _Active) -> bool:
    if _strictly_equal(value, other):
        return True
    tag = tag_of(value)
    if tag is not tag_of(other):
        return False
    if tag is Tag.OBJECT:
        return _guarded(_equal_objects, value, other, active)
    if tag is Tag.ARRAY:
        return _guarded(_equal_arrays, value, other, active)
    if tag is Tag.FUNCTION:
        return _prototype(value) is _prototype(other)
    if tag is Tag.DATE:
        return epoch_seconds(value) == epoch_seconds(other)
    return False


def is_equal(value: object, other: object) -> bool:
    """Deep structural equality.

    Objects compare on their own keys, arrays index by index from the end,
    functions by prototype (a bound method or partial reduces to its
    underlying function) and dates by epoch offset. A pair of containers
    already being compared further up the recursion counts as equal, so
    self-referential structures terminate.
    """
    return _equal(value, other, set())


def is_hash(value: object) -> bool:
    """Plain ``dict`` that does not look like a DOM node or window."""
    return (
        tag_of(value) is Tag.OBJECT
        and type(value) is dict
        and not truthy(prop(value, "nodeType"))
        and not truthy(prop(value, "setInterval"))
    )


def is_primitive(value: object) -> bool:
    if not truthy(value):
        return True
    if kind_of(value) is ValueKind.OBJECT:
        return False
    return not (tag_of(value) is Tag.OBJECT or is_function(value) or is_array(value))


def is_hosted(name: str, host: object) -> bool:
    """Whether ``host`` provides a non-primitive member called ``name``."""
    member = prop(host, name)
    kind = kind_of(member)
    if kind is ValueKind.OBJECT:
        return truthy(member)
    return kind not in _NON_HOST_KINDS


def is_instance(value: object, constructor: type | tuple[type, ...]) -> bool:
    return isinstance(value, constructor)


def is_base64(value: object) -> bool:
    return is_string(value) and (not value or _BASE64_RE.fullmatch(value) is not None)


def is_hex(value: object) -> bool:
    return is_string(value) and (not value or _HEX_RE.fullmatch(value) is not None)
