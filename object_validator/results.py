"""
results.py – helpers for reading result trees.

A result tree maps every schema key to either a ``bool`` or, for nested
schemas, another result tree.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Tuple

from .rules import NestedRule, Rule

__all__ = [
    "is_valid",
    "failures",
    "flatten",
    "columns",
    "row_values",
]


def _leaves(result: Mapping[str, Any], prefix: str, sep: str) -> Iterator[Tuple[str, bool]]:
    for key, outcome in result.items():
        path = f"{prefix}{sep}{key}" if prefix else key
        if isinstance(outcome, Mapping):
            yield from _leaves(outcome, path, sep)
        else:
            yield path, outcome is True


def is_valid(result: Mapping[str, Any]) -> bool:
    """True iff every leaf of *result* is ``True`` (an empty tree is valid)."""
    return all(ok for _, ok in _leaves(result, "", "."))


def failures(result: Mapping[str, Any], sep: str = ".") -> List[str]:
    """Paths of the failing leaves, in schema order."""
    return [path for path, ok in _leaves(result, "", sep) if not ok]


def flatten(result: Mapping[str, Any], sep: str = ".") -> Dict[str, bool]:
    """``{"user.name": True, ...}`` – one entry per leaf."""
    return dict(_leaves(result, "", sep))


def columns(schema: Mapping[str, Rule], sep: str = ".", _prefix: str = "") -> List[str]:
    """Leaf paths that validating against the compiled *schema* produces."""
    out: List[str] = []
    for key, rule in schema.items():
        path = f"{_prefix}{sep}{key}" if _prefix else key
        if isinstance(rule, NestedRule):
            out.extend(columns(rule.schema, sep, path))
        else:
            out.append(path)
    return out


def row_values(result: Mapping[str, Any], cols: List[str], sep: str = ".") -> List[bool]:
    """One value per entry of *cols* (as built by :func:`columns`).

    Leaves missing from *result* sit under a nested key that failed as a
    whole, so they are ``False``.
    """
    flat = flatten(result, sep)
    return [flat.get(col, False) for col in cols]
