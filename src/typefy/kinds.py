"""Single-tag predicates: one intrinsic class or ``typeof`` kind each."""

from __future__ import annotations

import datetime
import math
import operator
from xml.dom import Node
from xml.dom.minidom import Element

from . import values
from .values import FUNCTION_TAGS, UNDEFINED, Tag, ValueKind, kind_of, scalar, tag_of


_EPOCH: datetime.datetime = datetime.datetime(1970, 1, 1)
_EPOCH_UTC: datetime.datetime = _EPOCH.replace(tzinfo=datetime.timezone.utc)


def is_type(value: object, kind: ValueKind | str) -> bool:
    """Compare the ``typeof``-style kind of ``value`` against ``kind``."""
    return kind_of(value) == kind


def is_defined(value: object) -> bool:
    return value is not UNDEFINED


def is_undefined(value: object) -> bool:
    return value is UNDEFINED


def is_null(value: object) -> bool:
    return value is None


def is_bool(value: object) -> bool:
    return tag_of(value) is Tag.BOOLEAN


def is_true(value: object) -> bool:
    return is_bool(value) and bool(scalar(value)) is True


def is_false(value: object) -> bool:
    return is_bool(value) and bool(scalar(value)) is False


def is_string(value: object) -> bool:
    return tag_of(value) is Tag.STRING


def is_object(value: object) -> bool:
    return tag_of(value) is Tag.OBJECT


def is_regexp(value: object) -> bool:
    return tag_of(value) is Tag.REGEXP


def is_error(value: object) -> bool:
    return tag_of(value) is Tag.ERROR


def is_date(value: object) -> bool:
    return tag_of(value) is Tag.DATE


def epoch_seconds(value: datetime.date) -> float:
    """Seconds since the Unix epoch; naive values are read as UTC."""
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time())
    if value.tzinfo is None:
        return (value - _EPOCH).total_seconds()
    return (value - _EPOCH_UTC).total_seconds()


def is_valid_date(value: object) -> bool:
    return is_date(value) and math.isfinite(epoch_seconds(value))


def is_function(value: object) -> bool:
    alert = values.HOST.alert
    if alert is not None and value is alert:
        return True
    return tag_of(value) in FUNCTION_TAGS


def is_element(value: object) -> bool:
    """True for a DOM element node, when the host provides DOM elements."""
    return (
        values.HOST.elements
        and isinstance(value, Element)
        and value.nodeType == Node.ELEMENT_NODE
    )


def is_symbol(value: object) -> bool:
    if not values.HOST.symbols or tag_of(value) is not Tag.SYMBOL:
        return False
    try:
        return type(value)(value.value) is value
    except ValueError:
        return False


def is_bigint(value: object) -> bool:
    return (
        values.HOST.bigints
        and tag_of(value) is Tag.BIGINT
        and type(operator.index(value)) is int
    )
