"""Predicate registry, synonyms and a catalog of documented cases."""

from __future__ import annotations

import datetime
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Final

from . import arrays, general, kinds, numeric
from .errors import InvalidArgumentShapeError, InvalidNumericArgumentError, UnknownPredicateError


Predicate = Callable[..., bool]

UNARY: Final[dict[str, Predicate]] = {
    "is_defined": kinds.is_defined,
    "is_undefined": kinds.is_undefined,
    "is_null": kinds.is_null,
    "is_bool": kinds.is_bool,
    "is_true": kinds.is_true,
    "is_false": kinds.is_false,
    "is_string": kinds.is_string,
    "is_object": kinds.is_object,
    "is_regexp": kinds.is_regexp,
    "is_error": kinds.is_error,
    "is_date": kinds.is_date,
    "is_valid_date": kinds.is_valid_date,
    "is_function": kinds.is_function,
    "is_element": kinds.is_element,
    "is_symbol": kinds.is_symbol,
    "is_bigint": kinds.is_bigint,
    "is_array": arrays.is_array,
    "is_array_like": arrays.is_array_like,
    "is_arguments": arrays.is_arguments,
    "is_empty_array": arrays.is_empty_array,
    "is_empty_arguments": arrays.is_empty_arguments,
    "is_number": numeric.is_number,
    "is_nan": numeric.is_nan,
    "is_integer": numeric.is_integer,
    "is_decimal": numeric.is_decimal,
    "is_even": numeric.is_even,
    "is_odd": numeric.is_odd,
    "is_empty": general.is_empty,
    "is_hash": general.is_hash,
    "is_primitive": general.is_primitive,
    "is_base64": general.is_base64,
    "is_hex": general.is_hex,
}

PREDICATES: Final[dict[str, Predicate]] = {
    **UNARY,
    "is_type": kinds.is_type,
    "is_divisible_by": numeric.is_divisible_by,
    "is_ge": numeric.is_ge,
    "is_gt": numeric.is_gt,
    "is_le": numeric.is_le,
    "is_lt": numeric.is_lt,
    "is_within": numeric.is_within,
    "is_max": numeric.is_max,
    "is_min": numeric.is_min,
    "is_equal": general.is_equal,
    "is_hosted": general.is_hosted,
    "is_instance": general.is_instance,
}

SYNONYMS: Final[dict[str, str]] = {
    "is_a": "is_type",
    "is_args": "is_arguments",
    "is_boolean": "is_bool",
    "is_fn": "is_function",
    "is_int": "is_integer",
    "is_maximum": "is_max",
    "is_minimum": "is_min",
}


def resolve(name: str) -> Predicate:
    """Look a predicate up by canonical name or synonym."""
    canonical = SYNONYMS.get(name, name)
    try:
        return PREDICATES[canonical]
    except KeyError:
        raise UnknownPredicateError(name) from None


def classify(value: object) -> dict[str, bool]:
    """Result of every single-argument predicate for ``value``."""
    return {name: predicate(value) for name, predicate in UNARY.items()}


Expected = bool | type[Exception]


@dataclass(frozen=True)
class PredicateCase:
    id: str
    predicate: str
    args: tuple[object, ...]
    expected: Expected
    note: str

    @property
    def raises(self) -> bool:
        return not isinstance(self.expected, bool)


def run_case(case: PredicateCase) -> object:
    """Evaluate one catalog row; errors are returned, not raised."""
    predicate = resolve(case.predicate)
    try:
        return predicate(*case.args)
    except (InvalidNumericArgumentError, InvalidArgumentShapeError) as err:
        return type(err)


_INF = math.inf
_NAN = math.nan

CATALOG: Final[tuple[PredicateCase, ...]] = (
    PredicateCase("integer_finite", "is_integer", (4,), True, "finite integer"),
    PredicateCase("decimal_finite_integer", "is_decimal", (4,), False, "integers are not decimals"),
    PredicateCase("integer_fraction", "is_integer", (2.5,), False, "fractional value"),
    PredicateCase("decimal_fraction", "is_decimal", (2.5,), True, "fractional value"),
    PredicateCase("integer_nan", "is_integer", (_NAN,), False, "NaN is never an integer"),
    PredicateCase("decimal_infinity", "is_decimal", (_INF,), False, "infinity is not a decimal"),
    PredicateCase("even_four", "is_even", (4,), True, "plain parity"),
    PredicateCase("odd_four", "is_odd", (4,), False, "plain parity"),
    PredicateCase("even_infinity", "is_even", (_INF,), True, "infinity satisfies either parity"),
    PredicateCase("odd_infinity", "is_odd", (_INF,), True, "infinity satisfies either parity"),
    PredicateCase("divisible_plain", "is_divisible_by", (10, 5), True, "zero remainder"),
    PredicateCase("divisible_zero", "is_divisible_by", (10, 0), False, "zero divisor"),
    PredicateCase("divisible_infinite", "is_divisible_by", (_INF, 5), True, "infinite dividend"),
    PredicateCase("ge_infinite", "is_ge", (_INF, 1), False, "infinity is not orderable"),
    PredicateCase("lt_nan", "is_lt", (_NAN, 1), InvalidNumericArgumentError, "NaN operand"),
    PredicateCase("within_plain", "is_within", (5, 1, 10), True, "inside the range"),
    PredicateCase("within_infinite", "is_within", (_INF, 1, 10), True, "vacuous containment"),
    PredicateCase("within_nan", "is_within", (_NAN, 1, 10), InvalidNumericArgumentError, "NaN operand"),
    PredicateCase("within_string", "is_within", ("5", 1, 10), InvalidArgumentShapeError, "non-number operand"),
    PredicateCase("max_plain", "is_max", (5, [1, 2, 3]), True, "greatest value"),
    PredicateCase("max_empty", "is_max", (5, []), True, "vacuous truth"),
    PredicateCase("max_nan", "is_max", (_NAN, [1]), InvalidNumericArgumentError, "NaN operand"),
    PredicateCase("min_not_array_like", "is_min", (1, 3), InvalidArgumentShapeError, "scalar candidates"),
    PredicateCase("array_like_mapping", "is_array_like", ({"length": 2},), True, "own length entry"),
    PredicateCase("array_like_negative", "is_array_like", ({"length": -1},), False, "negative length"),
    PredicateCase("array_like_empty_list", "is_array_like", ([],), True, "empty lists are truthy"),
    PredicateCase("empty_list", "is_empty", ([],), True, "length zero"),
    PredicateCase("base64_padded", "is_base64", ("YQ==",), True, "two padding characters"),
    PredicateCase("base64_garbage", "is_base64", ("not base64!",), False, "characters outside the alphabet"),
    PredicateCase("base64_empty", "is_base64", ("",), True, "empty string"),
    PredicateCase("hex_mixed_case", "is_hex", ("DeadBeef",), True, "case-insensitive digits"),
    PredicateCase("hash_plain", "is_hash", ({},), True, "plain dict"),
    PredicateCase("hash_date", "is_hash", (datetime.date(2020, 1, 1),), False, "dates are not object-tagged"),
    PredicateCase("hash_node_like", "is_hash", ({"nodeType": 1},), False, "DOM-like host object"),
    PredicateCase("equal_nested", "is_equal", ({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]}), True, "deep equality"),
    PredicateCase("equal_extra_key", "is_equal", ({"a": 1}, {"a": 1, "b": 2}), False, "key sets differ"),
    PredicateCase("primitive_zero", "is_primitive", (0,), True, "falsy values are primitive"),
    PredicateCase("primitive_dict", "is_primitive", ({"a": 1},), False, "objects are not primitive"),
)


def write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
