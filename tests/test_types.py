import copy
import unittest
from collections import OrderedDict
from fractions import Fraction

from object_validator import types
from object_validator.types import UNDEFINED, ValueKind


class KindTests(unittest.TestCase):
    def test_kind_of_each_value(self):
        cases = [
            (UNDEFINED, ValueKind.UNDEFINED),
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (3, ValueKind.NUMBER),
            (2.5, ValueKind.NUMBER),
            ("s", ValueKind.STRING),
            ([1], ValueKind.ARRAY),
            ((1,), ValueKind.ARRAY),
            ({"a": 1}, ValueKind.OBJECT),
            (OrderedDict(), ValueKind.OBJECT),
            (object(), ValueKind.OTHER),
            (b"bytes", ValueKind.OTHER),
        ]
        for value, kind in cases:
            with self.subTest(value=value):
                self.assertIs(types.kind_of(value), kind)

    def test_undefined_is_a_falsy_singleton(self):
        self.assertFalse(UNDEFINED)
        self.assertIs(type(UNDEFINED)(), UNDEFINED)
        self.assertIs(copy.deepcopy({"x": UNDEFINED})["x"], UNDEFINED)
        self.assertEqual(repr(UNDEFINED), "UNDEFINED")


class PrimitiveTests(unittest.TestCase):
    def test_matches(self):
        good = {
            "string": ["", "abc"],
            "number": [0, -1, 2.5, float("inf"), Fraction(1, 3)],
            "boolean": [True, False],
            "object": [{}, {"a": 1}, [], (1, 2)],
            "symbol": [object()],
            "bigint": [0, 10 ** 40],
            "undefined": [UNDEFINED],
            "null": [None],
        }
        for tag, values in good.items():
            for value in values:
                with self.subTest(tag=tag, value=value):
                    self.assertTrue(types.check_primitive(tag, value))

    def test_mismatches(self):
        bad = {
            "string": [1, None, b"x"],
            "number": [True, "1", None],
            "boolean": [0, 1, "true"],
            "object": [None, "x", 1, UNDEFINED],
            "symbol": ["sym", None, UNDEFINED],
            "bigint": [1.0, True, "1"],
            "undefined": [None, 0, ""],
            "null": [UNDEFINED, 0, ""],
        }
        for tag, values in bad.items():
            for value in values:
                with self.subTest(tag=tag, value=value):
                    self.assertFalse(types.check_primitive(tag, value))

    def test_unknown_tag_fails_closed(self):
        self.assertFalse(types.check_primitive("integer", 1))
        self.assertFalse(types.check_primitive("", ""))
        self.assertNotIn("integer", types.PRIMITIVE_TAGS)


class StrictEqualsTests(unittest.TestCase):
    def test_equal(self):
        for left, right in [(1, 1.0), ("a", "a"), (None, None), (UNDEFINED, UNDEFINED), (False, False)]:
            with self.subTest(left=left, right=right):
                self.assertTrue(types.strict_equals(left, right))

    def test_not_equal(self):
        for left, right in [(0, False), (1, True), ("1", 1), (None, 0), ([1], (1,)), ("", None)]:
            with self.subTest(left=left, right=right):
                self.assertFalse(types.strict_equals(left, right))


class OtherValueTests(unittest.TestCase):
    def test_class_instances_and_sets_are_other(self):
        class Point:
            pass

        for value in (Point(), {1, 2}, frozenset()):
            with self.subTest(value=value):
                self.assertIs(types.kind_of(value), ValueKind.OTHER)
                self.assertFalse(types.check_primitive("object", value))
                self.assertFalse(types.check_primitive("symbol", value))
