"""
loader.py - read schemas and input documents from JSON files.

Public API
----------
load_schema(path) : parse a JSON schema file into a fresh ``dict``
load_json(path)   : parse any JSON document
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .validator import SchemaError

__all__ = ["load_schema", "load_json"]

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def load_json(path: str | Path) -> Any:
    """Read & parse a JSON file, raising crisp errors on failure."""
    p = Path(path)
    try:
        with p.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"File not found: {p}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {p}: {exc}") from exc

# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_schema(path: str | Path) -> dict:
    """Load a schema mapping from *path*.

    JSON can express type tags, ``enum`` / ``itemType`` descriptors,
    composite lists and nested schemas; predicates have to be added in
    Python.
    """
    data = load_json(path)
    if not isinstance(data, dict):
        raise SchemaError(
            f"Schema at '{path}' must be a JSON object, got {type(data).__name__}"
        )
    return data
