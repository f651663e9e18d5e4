"""
frame.py - validate tabular data row by row
===========================================

Each row of a :class:`pandas.DataFrame` is turned into a record (missing
cells are treated as absent fields) and run through a :class:`Validator`.
The outcome is another DataFrame with the same index and one boolean column
per leaf of the schema, e.g. ``user.name``.

Public API
----------
record_from_row(row) -> dict
validate_frame(validator, frame, *, sep=".") -> pandas.DataFrame
valid_rows(validator, frame) -> pandas.Series
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

import pandas as pd

from .results import columns, row_values
from .validator import Validator

__all__ = [
    "record_from_row",
    "validate_frame",
    "valid_rows",
]

log = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    # list-like and dict cells are always present
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def record_from_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop NA/NaN/None cells so they count as absent fields."""
    return {k: v for k, v in row.items() if not _is_missing(v)}


def validate_frame(validator: Validator, frame: pd.DataFrame, *, sep: str = ".") -> pd.DataFrame:
    """Validate every row of *frame*; returns a boolean DataFrame."""
    cols = columns(validator.schema, sep)
    rows = [
        row_values(validator.validate(record_from_row(rec)), cols, sep)
        for rec in frame.to_dict(orient="records")
    ]
    log.debug("validated %d rows against %d columns", len(rows), len(cols))
    out = pd.DataFrame(rows, index=frame.index, columns=cols)
    return out.astype(bool)


def valid_rows(validator: Validator, frame: pd.DataFrame) -> pd.Series:
    """``True`` for every row whose fields all pass."""
    return validate_frame(validator, frame).all(axis=1)
