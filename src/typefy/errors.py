"""Structured error types raised by the comparison predicates and registry."""

from __future__ import annotations


class PredicateError(Exception):
    """Base class for structured typefy errors."""


class InvalidNumericArgumentError(PredicateError, TypeError):
    """A numeric operand was NaN where a real number is required."""

    def __init__(self, message: str = "NaN is not a valid value") -> None:
        super().__init__(message)


class InvalidArgumentShapeError(PredicateError, TypeError):
    """An operand has the wrong kind: non-array-like candidates, non-number bounds."""


class UnknownPredicateError(PredicateError, KeyError):
    """Registry lookup for a name that is neither canonical nor a synonym."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown predicate {self.name!r}"
