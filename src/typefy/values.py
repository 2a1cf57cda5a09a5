"""Runtime value model: type tags, value kinds and host capabilities."""

from __future__ import annotations

import builtins
import datetime
import functools
import inspect
import logging
import math
import numbers
import os
import re
import types
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

import jax
import numpy as np


logger = logging.getLogger(__name__)

MAX_SAFE_INTEGER: Final[int] = 2**53 - 1


class _Undefined:
    """Absent value; what a missing property reads as."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED: Final = _Undefined()


class Tag(str, Enum):
    UNDEFINED = "Undefined"
    NULL = "Null"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    BIGINT = "BigInt"
    STRING = "String"
    SYMBOL = "Symbol"
    ARRAY = "Array"
    ARGUMENTS = "Arguments"
    OBJECT = "Object"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    FUNCTION = "Function"
    GENERATOR_FUNCTION = "GeneratorFunction"
    ASYNC_FUNCTION = "AsyncFunction"
    SET = "Set"
    BYTES = "Bytes"

    def __str__(self) -> str:
        return self.value


class ValueKind(str, Enum):
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    BIGINT = "bigint"
    STRING = "string"
    SYMBOL = "symbol"
    FUNCTION = "function"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value


FUNCTION_TAGS: Final[frozenset[Tag]] = frozenset(
    {Tag.FUNCTION, Tag.GENERATOR_FUNCTION, Tag.ASYNC_FUNCTION}
)

_KIND_BY_TAG: Final[dict[Tag, ValueKind]] = {
    Tag.UNDEFINED: ValueKind.UNDEFINED,
    Tag.BOOLEAN: ValueKind.BOOLEAN,
    Tag.NUMBER: ValueKind.NUMBER,
    Tag.BIGINT: ValueKind.BIGINT,
    Tag.STRING: ValueKind.STRING,
    Tag.SYMBOL: ValueKind.SYMBOL,
    Tag.FUNCTION: ValueKind.FUNCTION,
    Tag.GENERATOR_FUNCTION: ValueKind.FUNCTION,
    Tag.ASYNC_FUNCTION: ValueKind.FUNCTION,
}

_ROUTINE_TYPES: Final[tuple[type, ...]] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.WrapperDescriptorType,
    types.MethodWrapperType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
    type,
)


@dataclass(frozen=True)
class HostCapabilities:
    """Optional value kinds the running host provides, resolved once."""

    symbols: bool = True
    bigints: bool = False
    elements: bool = True
    alert: object | None = None


def _disabled(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "0") == "1"


def detect_host(environ: Mapping[str, str] | None = None) -> HostCapabilities:
    if environ is None:
        environ = os.environ
    host = HostCapabilities(
        symbols=not _disabled(environ, "TYPEFY_DISABLE_SYMBOLS"),
        bigints=environ.get("TYPEFY_ENABLE_BIGINTS", "0") == "1",
        elements=not _disabled(environ, "TYPEFY_DISABLE_ELEMENTS"),
        alert=getattr(builtins, "alert", None),
    )
    logger.debug("host capabilities resolved: %s", host)
    return host


HOST: HostCapabilities = detect_host()


def _is_ndarray(value: object) -> bool:
    return isinstance(value, (np.ndarray, jax.Array))


def scalar(value: object) -> object:
    """Unwrap numpy scalars and rank-0 arrays into plain Python scalars."""
    if isinstance(value, np.generic) or (_is_ndarray(value) and value.ndim == 0):
        return value.item()
    return value


def _ndarray_tag(value) -> Tag:
    if value.ndim > 0:
        return Tag.ARRAY
    kind = value.dtype.kind
    if kind == "b":
        return Tag.BOOLEAN
    if kind in "iuf":
        return Tag.NUMBER
    return Tag.OBJECT


def _routine_tag(value: object) -> Tag:
    if inspect.iscoroutinefunction(value) or inspect.isasyncgenfunction(value):
        return Tag.ASYNC_FUNCTION
    if inspect.isgeneratorfunction(value):
        return Tag.GENERATOR_FUNCTION
    return Tag.FUNCTION


def tag_of(value: object) -> Tag:
    """Intrinsic class of ``value``.

    Dispatches on ``type(value)`` rather than ``value.__class__`` so that
    objects overriding ``__class__``, ``__str__`` or ``__repr__`` cannot
    change their classification.
    """
    if value is UNDEFINED:
        return Tag.UNDEFINED
    if value is None:
        return Tag.NULL

    cls = type(value)
    if issubclass(cls, (bool, np.bool_)):
        return Tag.BOOLEAN
    if HOST.symbols and issubclass(cls, Enum):
        return Tag.SYMBOL
    if issubclass(cls, str):
        return Tag.STRING
    if HOST.bigints and issubclass(cls, int) and int.__abs__(value) > MAX_SAFE_INTEGER:
        return Tag.BIGINT
    if issubclass(cls, numbers.Real):
        return Tag.NUMBER
    if _is_ndarray(value):
        return _ndarray_tag(value)
    if issubclass(cls, (list, tuple)):
        return Tag.ARRAY
    if issubclass(cls, inspect.BoundArguments):
        return Tag.ARGUMENTS
    if issubclass(cls, datetime.date):
        return Tag.DATE
    if issubclass(cls, re.Pattern):
        return Tag.REGEXP
    if issubclass(cls, BaseException):
        return Tag.ERROR
    if issubclass(cls, _ROUTINE_TYPES):
        return _routine_tag(value)
    if issubclass(cls, (set, frozenset)):
        return Tag.SET
    if issubclass(cls, (bytes, bytearray, memoryview)):
        return Tag.BYTES
    return Tag.OBJECT


def kind_of(value: object) -> ValueKind:
    """Coarse ``typeof``-style kind; ``None`` reports as an object."""
    return _KIND_BY_TAG.get(tag_of(value), ValueKind.OBJECT)


def is_actual_nan(value: object) -> bool:
    x = scalar(value)
    return isinstance(x, float) and x != x


def is_infinite(value: object) -> bool:
    x = scalar(value)
    return isinstance(x, float) and math.isinf(x)


def truthy(value: object) -> bool:
    """Truthiness of the reference host: empty containers are truthy."""
    tag = tag_of(value)
    if tag in (Tag.UNDEFINED, Tag.NULL):
        return False
    if tag in (Tag.BOOLEAN, Tag.NUMBER, Tag.BIGINT):
        return not is_actual_nan(value) and bool(scalar(value))
    if tag is Tag.STRING:
        return value != ""
    return True


def prop(value: object, name: str) -> object:
    """Read a property: mapping entries for mappings, attributes otherwise."""
    if value is None or value is UNDEFINED:
        return UNDEFINED
    if isinstance(value, Mapping):
        return value.get(name, UNDEFINED)
    return getattr(value, name, UNDEFINED)


def _slot_names(cls: type) -> tuple[str, ...]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if name not in ("__dict__", "__weakref__"))
    return tuple(names)


def own_items(value: object) -> Mapping | None:
    """Own enumerable entries of an object, or None when not introspectable."""
    if isinstance(value, Mapping):
        return value
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, Mapping) and not isinstance(value, type):
        return attrs
    names = _slot_names(type(value))
    if names:
        return {name: getattr(value, name) for name in names if hasattr(value, name)}
    return None


def length_of(value: object) -> object:
    """Own ``length`` of a value, or UNDEFINED when it has none."""
    tag = tag_of(value)
    if tag in (Tag.ARRAY, Tag.STRING):
        return len(value)
    if tag is Tag.ARGUMENTS:
        return len(value.args)
    if tag is Tag.OBJECT:
        items = own_items(value)
        if items is not None and "length" in items:
            return items["length"]
    return UNDEFINED
