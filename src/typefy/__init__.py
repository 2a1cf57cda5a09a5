"""typefy public API: runtime type-classification predicates."""

from .errors import (
    InvalidArgumentShapeError,
    InvalidNumericArgumentError,
    PredicateError,
    UnknownPredicateError,
)
from .values import (
    HOST,
    UNDEFINED,
    HostCapabilities,
    Tag,
    ValueKind,
    detect_host,
    is_actual_nan,
    is_infinite,
    kind_of,
    tag_of,
)
from .kinds import (
    is_bigint,
    is_bool,
    is_date,
    is_defined,
    is_element,
    is_error,
    is_false,
    is_function,
    is_null,
    is_object,
    is_regexp,
    is_string,
    is_symbol,
    is_true,
    is_type,
    is_undefined,
    is_valid_date,
)
from .arrays import (
    is_arguments,
    is_array,
    is_array_like,
    is_empty_arguments,
    is_empty_array,
)
from .numeric import (
    is_decimal,
    is_divisible_by,
    is_even,
    is_ge,
    is_gt,
    is_integer,
    is_le,
    is_lt,
    is_max,
    is_min,
    is_nan,
    is_number,
    is_odd,
    is_within,
)
from .general import (
    is_base64,
    is_empty,
    is_equal,
    is_hash,
    is_hex,
    is_hosted,
    is_instance,
    is_primitive,
)
from .catalog import PREDICATES, SYNONYMS, classify, resolve

# Alternate names for the same functions.
is_a = is_type
is_args = is_arguments
is_boolean = is_bool
is_fn = is_function
is_int = is_integer
is_maximum = is_max
is_minimum = is_min

__all__ = [
    "tag_of",
    "kind_of",
    "Tag",
    "ValueKind",
    "UNDEFINED",
    "HOST",
    "HostCapabilities",
    "detect_host",
    "is_actual_nan",
    "is_infinite",
    "is_type",
    "is_defined",
    "is_undefined",
    "is_null",
    "is_bool",
    "is_true",
    "is_false",
    "is_string",
    "is_object",
    "is_regexp",
    "is_error",
    "is_date",
    "is_valid_date",
    "is_function",
    "is_element",
    "is_symbol",
    "is_bigint",
    "is_array",
    "is_array_like",
    "is_arguments",
    "is_empty_array",
    "is_empty_arguments",
    "is_number",
    "is_nan",
    "is_integer",
    "is_decimal",
    "is_even",
    "is_odd",
    "is_divisible_by",
    "is_ge",
    "is_gt",
    "is_le",
    "is_lt",
    "is_within",
    "is_max",
    "is_min",
    "is_empty",
    "is_equal",
    "is_hash",
    "is_primitive",
    "is_hosted",
    "is_instance",
    "is_base64",
    "is_hex",
    "is_a",
    "is_args",
    "is_boolean",
    "is_fn",
    "is_int",
    "is_maximum",
    "is_minimum",
    "PREDICATES",
    "SYNONYMS",
    "resolve",
    "classify",
    "PredicateError",
    "InvalidNumericArgumentError",
    "InvalidArgumentShapeError",
    "UnknownPredicateError",
]
