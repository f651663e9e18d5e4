"""
rules.py - compiled form of the schema grammar
==============================================

A schema is authored as a plain mapping from field name to a *rule*.  Before
any input is inspected, every rule is compiled once into one of a closed set
of frozen dataclasses, so the validation engine dispatches on a known variant
instead of sniffing shapes on every call.

Public API
----------
PrimitiveRule, PredicateRule, EnumRule, ArrayRule, CompositeRule,
NestedRule, UnrecognizedRule
    The rule variants.

compile_rule(raw) -> Rule
    Compile one authored rule.

compile_schema(raw) -> Mapping[str, Rule]
    Compile a whole schema into a read-only mapping.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Tuple, Union

from .types import strict_equals

__all__ = [
    "PrimitiveRule",
    "PredicateRule",
    "EnumRule",
    "ArrayRule",
    "CompositeRule",
    "NestedRule",
    "UnrecognizedRule",
    "Rule",
    "compile_rule",
    "compile_schema",
]

# --------------------------------------------------------------------------- #
# Rule variants                                                               #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class PrimitiveRule:
    """Value must carry the runtime type named by *tag* (``"string"``, ...)."""

    tag: str


@dataclass(frozen=True)
class PredicateRule:
    """Value is valid iff ``func(value)`` is truthy."""

    func: Callable[[Any], Any]


@dataclass(frozen=True)
class EnumRule:
    """Value must strictly equal one of *values*."""

    values: Tuple[Any, ...]

    def __contains__(self, value: Any) -> bool:
        return any(strict_equals(value, member) for member in self.values)


@dataclass(frozen=True)
class ArrayRule:
    """Value must be a list/tuple whose every element passes *item*."""

    item: "Rule"


@dataclass(frozen=True)
class CompositeRule:
    """Value must pass every rule in *rules* (logical AND)."""

    rules: Tuple["Rule", ...]


@dataclass(frozen=True)
class NestedRule:
    """Value is checked field by field against a nested *schema*."""

    schema: Mapping[str, "Rule"]


@dataclass(frozen=True)
class UnrecognizedRule:
    """An authored rule of no known shape; it never passes."""

    raw: Any


Rule = Union[
    PrimitiveRule,
    PredicateRule,
    EnumRule,
    ArrayRule,
    CompositeRule,
    NestedRule,
    UnrecognizedRule,
]

_RULE_TYPES = (
    PrimitiveRule,
    PredicateRule,
    EnumRule,
    ArrayRule,
    CompositeRule,
    NestedRule,
    UnrecognizedRule,
)

# --------------------------------------------------------------------------- #
# Compilation                                                                 #
# --------------------------------------------------------------------------- #

def _enum_members(members: Any) -> Tuple[Any, ...] | None:
    """Return the allowed literals of an ``enum`` descriptor, or None."""
    if isinstance(members, type) and issubclass(members, enum.Enum):
        # accept both the members themselves and their raw values
        return tuple(m.value for m in members) + tuple(members)
    if isinstance(members, Mapping):
        return tuple(members.values())
    if isinstance(members, (list, tuple, set, frozenset)):
        return tuple(members)
    return None


def compile_rule(raw: Any) -> Rule:
    """Compile one authored rule into its variant.

    Never raises: anything that does not fit the grammar becomes an
    :class:`UnrecognizedRule`, which is reported when it is evaluated.
    """
    if isinstance(raw, _RULE_TYPES):
        return raw

    if isinstance(raw, str):
        return PrimitiveRule(raw)

    # Enum classes are callable, so they must be caught before predicates
    if isinstance(raw, type) and issubclass(raw, enum.Enum):
        return EnumRule(_enum_members(raw))

    if callable(raw):
        return PredicateRule(raw)

    if isinstance(raw, Mapping):
        if "enum" in raw:
            members = _enum_members(raw["enum"])
            return EnumRule(members) if members is not None else UnrecognizedRule(raw)
        if "itemType" in raw:
            return ArrayRule(compile_rule(raw["itemType"]))
        return NestedRule(compile_schema(raw))

    if isinstance(raw, (list, tuple)):
        return CompositeRule(tuple(compile_rule(r) for r in raw))

    return UnrecognizedRule(raw)


def compile_schema(raw: Mapping[str, Any]) -> Mapping[str, Rule]:
    """Compile every field of *raw* and freeze the result."""
    return MappingProxyType({key: compile_rule(rule) for key, rule in raw.items()})
