"""Array, array-like and arguments-object predicates."""

from __future__ import annotations

from collections.abc import Mapping

from .kinds import is_bool, is_function, is_object
from .values import (
    UNDEFINED,
    Tag,
    is_actual_nan,
    is_infinite,
    length_of,
    prop,
    scalar,
    tag_of,
    truthy,
)


def is_array(value: object) -> bool:
    return isinstance(value, list) or tag_of(value) is Tag.ARRAY


def is_array_like(value: object) -> bool:
    """Truthy, non-boolean, with an own finite non-negative numeric length.

    Inherited lengths do not count: a class attribute ``length`` is not
    enough, it has to live on the instance (or be a mapping entry).
    """
    if not truthy(value) or is_bool(value):
        return False
    length = length_of(value)
    if tag_of(length) is not Tag.NUMBER:
        return False
    if is_actual_nan(length) or is_infinite(length):
        return False
    return scalar(length) >= 0


def is_arguments(value: object) -> bool:
    if tag_of(value) is Tag.ARGUMENTS:
        return True
    return (
        not is_array(value)
        and is_array_like(value)
        and is_object(value)
        and is_function(prop(value, "callee"))
    )


def is_empty_array(value: object) -> bool:
    return is_array(value) and len(value) == 0


def is_empty_arguments(value: object) -> bool:
    return is_arguments(value) and scalar(length_of(value)) == 0


def element_at(value: object, index: int | float) -> object:
    """Element ``index`` of an array-like, or UNDEFINED when absent.

    A fractional index names a key of its own (``"1.5"``) and never reads
    an integer position.
    """
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    tag = tag_of(value)
    if tag is Tag.ARGUMENTS:
        value = value.args
        tag = Tag.ARRAY
    if tag in (Tag.ARRAY, Tag.STRING):
        if isinstance(index, int) and 0 <= index < len(value):
            return value[index]
        return UNDEFINED
    if isinstance(value, Mapping):
        if index in value:
            return value[index]
        return value.get(str(index), UNDEFINED)
    return UNDEFINED
