"""Numeric predicates and the ordering comparison family."""

from __future__ import annotations

import operator
from typing import Callable

from .arrays import element_at, is_array_like
from .errors import InvalidArgumentShapeError, InvalidNumericArgumentError
from .values import Tag, is_actual_nan, is_infinite, length_of, scalar, tag_of


def is_number(value: object) -> bool:
    return tag_of(value) is Tag.NUMBER


def is_nan(value: object) -> bool:
    """True for anything that is not a usable number, NaN included."""
    return not is_number(value) or is_actual_nan(value)


def _usable(value: object) -> bool:
    return is_number(value) and not is_actual_nan(value)


def is_integer(value: object) -> bool:
    return _usable(value) and scalar(value) % 1 == 0


def is_decimal(value: object) -> bool:
    return _usable(value) and not is_infinite(value) and scalar(value) % 1 != 0


def is_even(value: object) -> bool:
    """Parity test; infinities satisfy both ``is_even`` and ``is_odd``."""
    return is_infinite(value) or (_usable(value) and scalar(value) % 2 == 0)


def is_odd(value: object) -> bool:
    return is_infinite(value) or (_usable(value) and scalar(value) % 2 != 0)


def is_divisible_by(value: object, n: object) -> bool:
    if is_infinite(value) or is_infinite(n):
        return True
    if not (_usable(value) and _usable(n)):
        return False
    divisor = scalar(n)
    return divisor != 0 and scalar(value) % divisor == 0


def _reject_nan(*operands: object) -> None:
    if any(is_actual_nan(operand) for operand in operands):
        raise InvalidNumericArgumentError()


def _holds(relation: Callable[[object, object], object], value: object, other: object) -> bool:
    try:
        return bool(relation(scalar(value), scalar(other)))
    except (TypeError, ValueError):
        # unordered operands
        return False


def _compare(relation: Callable[[object, object], object], value: object, other: object) -> bool:
    _reject_nan(value, other)
    if is_infinite(value) or is_infinite(other):
        return False
    return _holds(relation, value, other)


def is_ge(value: object, other: object) -> bool:
    return _compare(operator.ge, value, other)


def is_gt(value: object, other: object) -> bool:
    return _compare(operator.gt, value, other)


def is_le(value: object, other: object) -> bool:
    return _compare(operator.le, value, other)


def is_lt(value: object, other: object) -> bool:
    return _compare(operator.lt, value, other)


def is_within(value: object, start: object, finish: object) -> bool:
    """Range containment; any infinite operand makes the range hold."""
    _reject_nan(value, start, finish)
    if not (is_number(value) and is_number(start) and is_number(finish)):
        raise InvalidArgumentShapeError("all arguments must be numbers")
    if is_infinite(value) or is_infinite(start) or is_infinite(finish):
        return True
    return scalar(start) <= scalar(value) <= scalar(finish)


def _extreme(value: object, others: object, violates: Callable[[object, object], object]) -> bool:
    _reject_nan(value)
    if not is_array_like(others):
        raise InvalidArgumentShapeError("second argument must be array-like")
    # fractional lengths step down through fractional keys
    index = scalar(length_of(others))
    while index > 0:
        index -= 1
        if _holds(violates, value, element_at(others, index)):
            return False
    return True


def is_max(value: object, others: object) -> bool:
    """True when no candidate in ``others`` is greater than ``value``."""
    return _extreme(value, others, operator.lt)


def is_min(value: object, others: object) -> bool:
    """True when no candidate in ``others`` is less than ``value``."""
    return _extreme(value, others, operator.gt)
