from __future__ import annotations

import collections
import datetime
import enum
import functools
import importlib.util
import inspect
import math
import types
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


class Color(enum.Enum):
    RED = 1


class Point:
    def __init__(self, x, y) -> None:
        self.x = x
        self.y = y

    def norm(self):
        return math.hypot(self.x, self.y)


class Empty:
    pass


def _variadic(*args):
    return args


def _add(a, b):
    return a + b


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for general predicate tests")
class EmptinessTests(unittest.TestCase):
    def test_is_empty_by_tag(self) -> None:
        from typefy import UNDEFINED, is_empty

        bind = inspect.signature(_variadic).bind
        empties = ([], (), "", {}, bind(), Empty(), object(), 0, None, UNDEFINED, False, math.nan)
        for value in empties:
            with self.subTest(value=value):
                self.assertTrue(is_empty(value))

        filled = Empty()
        filled.a = 1
        non_empties = ([0], " ", {"a": None}, bind(1), filled, 1, True, set(), _add, "0")
        for value in non_empties:
            with self.subTest(value=value):
                self.assertFalse(is_empty(value))


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for general predicate tests")
class EqualityTests(unittest.TestCase):
    def test_primitive_equality(self) -> None:
        from typefy import is_equal

        self.assertTrue(is_equal(1, 1))
        self.assertTrue(is_equal(1, 1.0))
        self.assertTrue(is_equal("a", "a"))
        self.assertTrue(is_equal(None, None))
        self.assertFalse(is_equal(1, True))
        self.assertFalse(is_equal(1, "1"))
        self.assertFalse(is_equal(0, None))
        self.assertFalse(is_equal(math.nan, float("nan")))

    def test_structural_equality(self) -> None:
        from typefy import is_equal

        self.assertTrue(is_equal([1, 2], [1, 2]))
        self.assertTrue(is_equal([1, 2], (1, 2)))
        self.assertFalse(is_equal([1, 2], [2, 1]))
        self.assertFalse(is_equal([1], [1, 2]))
        self.assertTrue(is_equal({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]}))
        self.assertFalse(is_equal({"a": 1}, {"b": 1}))
        self.assertFalse(is_equal({"a": 1}, {"a": 1, "b": 2}))
        self.assertFalse(is_equal({"a": 1}, [1]))
        self.assertTrue(is_equal(Point(1, 2), Point(1, 2)))
        self.assertFalse(is_equal(Point(1, 2), Point(2, 1)))
        self.assertTrue(is_equal(Point(1, 2), {"x": 1, "y": 2}))

    def test_equality_is_symmetric(self) -> None:
        from typefy import is_equal

        pairs = [
            ([1, [2]], [1, [2]]),
            ({"a": 1}, {"a": 1, "b": 2}),
            ([1, 2], [1]),
            ({"k": [1]}, {"k": (1,)}),
            (Point(0, 0), {"x": 0}),
        ]
        for left, right in pairs:
            with self.subTest(left=left, right=right):
                self.assertEqual(is_equal(left, right), is_equal(right, left))

    def test_function_equality_compares_prototypes(self) -> None:
        from typefy import is_equal

        self.assertTrue(is_equal(_add, _add))
        self.assertFalse(is_equal(_add, _variadic))
        self.assertFalse(is_equal(lambda: 1, lambda: 1))
        self.assertTrue(is_equal(Point(1, 1).norm, Point(3, 4).norm))
        self.assertTrue(is_equal(functools.partial(_add, 1), _add))

    def test_date_equality_compares_epoch(self) -> None:
        from typefy import is_equal

        naive = datetime.datetime(2020, 1, 1)
        aware = datetime.datetime(2020, 1, 1, tzinfo=datetime.timezone.utc)
        self.assertTrue(is_equal(naive, datetime.datetime(2020, 1, 1)))
        self.assertTrue(is_equal(naive, aware))
        self.assertTrue(is_equal(datetime.date(2020, 1, 1), naive))
        self.assertFalse(is_equal(naive, datetime.datetime(2020, 1, 2)))

    def test_other_tags_only_equal_by_identity(self) -> None:
        from typefy import is_equal

        err = ValueError("x")
        self.assertTrue(is_equal(err, err))
        self.assertFalse(is_equal(ValueError("x"), ValueError("x")))
        self.assertFalse(is_equal({1}, {1}))
        self.assertTrue(is_equal(Color.RED, Color.RED))

    def test_cyclic_structures_terminate(self) -> None:
        from typefy import is_equal

        left: list = []
        left.append(left)
        right: list = []
        right.append(right)
        self.assertTrue(is_equal(left, left))
        self.assertTrue(is_equal(left, right))

        a: dict = {"v": 1}
        a["self"] = a
        b: dict = {"v": 1}
        b["self"] = b
        c: dict = {"v": 2}
        c["self"] = c
        self.assertTrue(is_equal(a, b))
        self.assertFalse(is_equal(a, c))


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for general predicate tests")
class ShapePredicateTests(unittest.TestCase):
    def test_is_hash(self) -> None:
        from typefy import is_hash

        self.assertTrue(is_hash({}))
        self.assertTrue(is_hash({"a": 1}))
        self.assertTrue(is_hash({"nodeType": 0}))
        for value in (
            collections.OrderedDict(),
            Point(1, 2),
            datetime.date(2020, 1, 1),
            {"nodeType": 1},
            {"setInterval": print},
            [],
            None,
        ):
            with self.subTest(value=value):
                self.assertFalse(is_hash(value))

    def test_is_primitive(self) -> None:
        from typefy import UNDEFINED, is_primitive

        for value in (0, "", None, UNDEFINED, False, math.nan, 1, "a", True, 2**60, Color.RED):
            with self.subTest(value=value):
                self.assertTrue(is_primitive(value))
        for value in ({}, [], (), print, _add, object(), datetime.date(2020, 1, 1), ValueError()):
            with self.subTest(value=value):
                self.assertFalse(is_primitive(value))

    def test_is_hosted(self) -> None:
        from typefy import is_hosted

        host = types.SimpleNamespace(
            doc=object(),
            flag=True,
            count=3,
            name="x",
            fn=print,
            empty=None,
        )
        self.assertTrue(is_hosted("doc", host))
        self.assertTrue(is_hosted("fn", host))
        self.assertFalse(is_hosted("flag", host))
        self.assertFalse(is_hosted("count", host))
        self.assertFalse(is_hosted("name", host))
        self.assertFalse(is_hosted("empty", host))
        self.assertFalse(is_hosted("missing", host))
        self.assertTrue(is_hosted("fn", {"fn": print}))
        self.assertFalse(is_hosted("fn", None))

    def test_is_instance(self) -> None:
        from typefy import is_instance

        self.assertTrue(is_instance(1, int))
        self.assertFalse(is_instance("a", int))
        self.assertTrue(is_instance([], (list, tuple)))
        self.assertTrue(is_instance(Point(1, 2), Point))


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for general predicate tests")
class EncodingTests(unittest.TestCase):
    def test_is_base64(self) -> None:
        from typefy import is_base64

        for value in ("YQ==", "YWI=", "YWJj", "", "QUJDRA=="):
            with self.subTest(value=value):
                self.assertTrue(is_base64(value))
        for value in ("not base64!", "YQ=", "YQ", "YQ==\n", "Y===", 123, None, b"YQ=="):
            with self.subTest(value=value):
                self.assertFalse(is_base64(value))

    def test_is_hex(self) -> None:
        from typefy import is_hex

        for value in ("ff", "DeadBeef", "0123456789", ""):
            with self.subTest(value=value):
                self.assertTrue(is_hex(value))
        for value in ("0x1f", "g", "ff\n", 255, None):
            with self.subTest(value=value):
                self.assertFalse(is_hex(value))


if __name__ == "__main__":
    unittest.main()
