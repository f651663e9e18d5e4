"""
types.py – value model shared by the validation engine.

This module consolidates the low-level helpers for:
- The ``UNDEFINED`` sentinel (a key explicitly bound to "no value")
- Value classification (:class:`ValueKind` / :func:`kind_of`)
- The primitive-type predicate table behind the string type tags
- Strict equality used for enum membership
"""

from __future__ import annotations

import enum
import numbers
from typing import Any, Callable, Dict, Mapping

__all__ = [
    "UNDEFINED",
    "PRIMITIVE_TAGS",
    "ValueKind",
    "kind_of",
    "check_primitive",
    "strict_equals",
]

# --------------------------------------------------------------------------- #
# Sentinel                                                                    #
# --------------------------------------------------------------------------- #

class _Undefined:
    """Type of :data:`UNDEFINED`; there is only ever one instance."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: dict) -> "_Undefined":
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

# --------------------------------------------------------------------------- #
# Value classification                                                        #
# --------------------------------------------------------------------------- #

class ValueKind(enum.Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """Classify *value* into exactly one :class:`ValueKind`.

    ``bool`` is tested before numbers because it subclasses ``int``; lists
    and tuples are arrays, any other mapping is an object.  Anything else
    (class instances, sets, bytes) is ``OTHER``: it fails the ``"object"``
    tag, and only a bare ``object()`` passes ``"symbol"``.
    """
    if value is UNDEFINED:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return ValueKind.OTHER

# --------------------------------------------------------------------------- #
# Primitive-type table                                                        #
# --------------------------------------------------------------------------- #

def _is_bigint(value: Any) -> bool:
    return kind_of(value) is ValueKind.NUMBER and isinstance(value, numbers.Integral)


def _is_symbol(value: Any) -> bool:
    # bare ``object()`` instances are the closest thing to an opaque symbol
    return type(value) is object


_TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string":    lambda v: kind_of(v) is ValueKind.STRING,
    "number":    lambda v: kind_of(v) is ValueKind.NUMBER,
    "boolean":   lambda v: kind_of(v) is ValueKind.BOOLEAN,
    # arrays are objects too; null never is
    "object":    lambda v: kind_of(v) in (ValueKind.OBJECT, ValueKind.ARRAY),
    "symbol":    _is_symbol,
    "bigint":    _is_bigint,
    "undefined": lambda v: v is UNDEFINED,
    "null":      lambda v: v is None,
}

PRIMITIVE_TAGS = frozenset(_TYPE_CHECKS)


def check_primitive(tag: str, value: Any) -> bool:
    """Return True iff *value* matches the primitive type *tag*.

    Unknown tags never match.
    """
    check = _TYPE_CHECKS.get(tag)
    if check is None:
        return False
    return check(value)

# --------------------------------------------------------------------------- #
# Equality                                                                    #
# --------------------------------------------------------------------------- #

def strict_equals(left: Any, right: Any) -> bool:
    """Equality without cross-kind coercion.

    Numbers compare numerically (``1 == 1.0``), but a ``bool`` only equals a
    ``bool`` and a string never equals a number.
    """
    left_kind, right_kind = kind_of(left), kind_of(right)
    if left_kind is not right_kind:
        return False
    if left_kind is ValueKind.NUMBER:
        return left == right
    if left_kind in (ValueKind.UNDEFINED, ValueKind.NULL):
        return True
    if type(left) is not type(right):
        return False
    return left == right
