"""
validator.py - schema-driven field validation engine
====================================================

A :class:`Validator` is built once from a schema and can then be pointed at
any number of input mappings.  Each call walks the schema (never the input),
and returns a fresh result tree with the same keys as the schema: a ``bool``
per field, or a nested tree for nested schemas.

Nothing is raised for invalid data; failures are reported as ``False`` at the
corresponding key.  Exceptions raised by user predicates are *not* caught and
reach the caller of :meth:`Validator.validate`.

Public API
----------
SchemaError
    Raised when a schema *file* cannot be used (see :mod:`.loader`).

Validator(schema, *, logger=None)
    ``validate(data)``, ``validate_many(records)``, ``from_file(path)``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from . import types
from .rules import (
    ArrayRule,
    CompositeRule,
    EnumRule,
    NestedRule,
    PredicateRule,
    PrimitiveRule,
    Rule,
    UnrecognizedRule,
    compile_schema,
)

__all__ = [
    "SchemaError",
    "Validator",
]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaError(ValueError):
    """Raised when a schema document is not usable as a schema."""


_EMPTY: Mapping[str, Any] = {}

# --------------------------------------------------------------------------- #
# Validator                                                                   #
# --------------------------------------------------------------------------- #

class Validator:
    """Validate input mappings against a fixed schema.

    Parameters
    ----------
    schema : Mapping[str, Any]
        Field name -> rule.  Rules are compiled immediately; malformed rules
        are *not* rejected here and only fail (with a warning) when used.
    logger : logging.Logger, optional
        Receives diagnostics about unrecognised rules and a DEBUG record of
        every result tree.  Defaults to this module's logger.
    """

    def __init__(self, schema: Mapping[str, Any], *, logger: logging.Logger | None = None):
        self._schema = compile_schema(schema)
        self._log = logger or log

    @classmethod
    def from_file(cls, path: str | Path, **kwargs: Any) -> "Validator":
        """Build a validator from a JSON schema file."""
        from . import loader

        return cls(loader.load_schema(path), **kwargs)

    @property
    def schema(self) -> Mapping[str, Rule]:
        """Read-only view of the compiled schema."""
        return self._schema

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={list(self._schema)})"

    # ------------------------------------------------------------------ #
    # Entry points                                                       #
    # ------------------------------------------------------------------ #

    def validate(self, data: Any) -> Dict[str, Any]:
        """Return the result tree for *data*.

        A non-mapping *data* is treated as an empty record, so every field
        is judged by the missing-key rules.
        """
        result = self._validate_mapping(data, self._schema, path="")
        self._log.debug("validation result: %s", result)
        return result

    def validate_many(self, records: Iterable[Any]) -> List[Dict[str, Any]]:
        """Validate each record independently."""
        return [self.validate(record) for record in records]

    # ------------------------------------------------------------------ #
    # Core recursive matcher                                             #
    # ------------------------------------------------------------------ #

    def _validate_mapping(self, data: Any, schema: Mapping[str, Rule], path: str) -> Dict[str, Any]:
        if not isinstance(data, Mapping):
            data = _EMPTY

        result: Dict[str, Any] = {}
        for key, rule in schema.items():
            present = key in data
            value = data[key] if present else types.UNDEFINED
            key_path = f"{path}.{key}" if path else key

            # 1) + 2) absence itself may be what the schema asks for
            if isinstance(rule, PrimitiveRule) and rule.tag == "undefined":
                result[key] = value is types.UNDEFINED
                continue
            if isinstance(rule, PrimitiveRule) and rule.tag == "null":
                result[key] = value is None
                continue

            # a missing nested object still produces a tree of its own
            if isinstance(rule, NestedRule):
                if value is types.UNDEFINED or types.kind_of(value) is types.ValueKind.OBJECT:
                    result[key] = self._validate_mapping(value, rule.schema, key_path)
                else:
                    self._log.warning("Unhandled validation case for key: %s (expected a mapping, got %s)",
                                      key_path, type(value).__name__)
                    result[key] = False
                continue

            # 3) every other rule kind needs a value to look at
            if not present:
                result[key] = False
                continue

            # 4) dispatch on the rule variant
            if isinstance(rule, CompositeRule):
                result[key] = self._check_composite(value, rule, key_path)
            elif isinstance(rule, UnrecognizedRule):
                self._log.warning("Unhandled validation case for key: %s (rule %r)", key_path, rule.raw)
                result[key] = False
            else:
                result[key] = self._check_simple(value, rule, key_path)
        return result

    # ------------------------------------------------------------------ #
    # Leaf checks                                                        #
    # ------------------------------------------------------------------ #

    def _check_simple(self, value: Any, rule: Rule, path: str) -> bool:
        """Apply a primitive, predicate, enum or array rule to *value*."""
        if isinstance(rule, PrimitiveRule):
            return types.check_primitive(rule.tag, value)
        if isinstance(rule, PredicateRule):
            return bool(rule.func(value))
        if isinstance(rule, EnumRule):
            return self._check_enum(value, rule)
        if isinstance(rule, ArrayRule):
            return self._check_array(value, rule, path)
        self._log.warning("Unsupported rule %s at %s", type(rule).__name__, path)
        return False

    @staticmethod
    def _check_enum(value: Any, rule: EnumRule) -> bool:
        return value in rule

    def _check_array(self, value: Any, rule: ArrayRule, path: str) -> bool:
        """Every element of the list/tuple *value* must pass ``rule.item``."""
        if types.kind_of(value) is not types.ValueKind.ARRAY:
            return False
        item = rule.item
        if not isinstance(item, (PrimitiveRule, EnumRule, PredicateRule)):
            if value:
                self._log.warning("Unsupported item rule %s at %s", type(item).__name__, path)
            return len(value) == 0
        return all(self._check_simple(element, item, path) for element in value)

    def _check_composite(self, value: Any, rule: CompositeRule, path: str) -> bool:
        """Logical AND of the member rules, left to right."""
        for member in rule.rules:
            if not isinstance(member, (PrimitiveRule, PredicateRule, EnumRule, ArrayRule)):
                self._log.warning("Unsupported composite member %s at %s", type(member).__name__, path)
                return False
            if not self._check_simple(value, member, path):
                return False
        return True
