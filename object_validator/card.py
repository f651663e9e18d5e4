"""
card.py - Markdown rendering of result trees.

Public API
----------
to_markdown_card(result, *, heading_level=2) -> str
    Leaf fields become checklist items, nested trees become headed
    sections.
"""
from __future__ import annotations
from typing import Any, Mapping

__all__ = ["to_markdown_card"]

def _checkbox(ok: bool) -> str:
    """Return a Markdown task-list marker."""
    return "[x]" if ok is True else "[ ]"

def _title(key: str) -> str:
    return key.replace('_', ' ').title()

def to_markdown_card(result: Mapping[str, Any], *, heading_level: int = 2) -> str:
    """
    Convert a validation *result* tree into a Markdown card.

    Parameters
    ----------
    result : Mapping[str, Any]
        Output of :meth:`Validator.validate`.
    heading_level : int, default 2
        Markdown heading level for nested trees (##, ###, …).  Deeper
        levels get one extra ``#`` each.

    Returns
    -------
    str
        Markdown document: leaf fields become checklist items, nested
        trees become headed sections.
    """
    h = "#" * heading_level
    items: list[str] = []
    sections: list[str] = []
    for key, outcome in result.items():
        if isinstance(outcome, Mapping):
            body = to_markdown_card(outcome, heading_level=heading_level + 1)
            sections.append(f"{h} {_title(key)}")
            sections.append(body if body else "_no fields_")
            sections.append("")      # blank line after each section
        else:
            items.append(f"- {_checkbox(outcome)} {key}")
    parts = items + ([""] if items and sections else []) + sections
    return "\n".join(parts).rstrip()
