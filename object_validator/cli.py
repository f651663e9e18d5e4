"""
cli.py - command-line front-end
===============================

    python -m object_validator SCHEMA [INPUT] [--format json|markdown|csv]

*SCHEMA* is a JSON schema file.  *INPUT* may be a JSON file, a ``.csv`` file
(validated row by row), a JSON literal, or ``-`` / omitted for stdin.  A JSON
array always yields a list of result trees, even with one element.  CSV
cells are validated as text; pandas type inference is turned off.

The exit status is 0 when every record is valid and 1 otherwise; argparse
exits with 2 on usage errors.  Flags may also be read from a file with
``@args.txt``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Sequence, Tuple

import pandas as pd

from . import __version__
from . import loader
from .card import to_markdown_card
from .results import columns, is_valid, row_values
from .validator import SchemaError, Validator

__all__ = ["build_arg_parser", "read_records", "main"]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Parser builder                                                              #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    """Return the :pyclass:`argparse.ArgumentParser` for the CLI."""
    p = argparse.ArgumentParser(
        prog="object-validator",
        description="Validate JSON or CSV records against a field schema.",
        fromfile_prefix_chars="@",
    )
    p.add_argument("--version", action="version", version=f"object-validator : {__version__}")
    p.add_argument("schema", metavar="SCHEMA", help="JSON file holding the schema.")
    p.add_argument(
        "input",
        metavar="INPUT",
        nargs="?",
        default="-",
        help="JSON/CSV file, JSON literal, or '-' for stdin (default).",
    )
    p.add_argument(
        "--format",
        choices=("json", "markdown", "csv"),
        default="json",
        help="Output format for the result trees.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging threshold for diagnostics (default: WARNING).",
    )
    return p

# --------------------------------------------------------------------------- #
# Input handling                                                              #
# --------------------------------------------------------------------------- #

def read_records(source: str) -> Tuple[List[Any], bool]:
    """Load *source* into a list of records.

    * ``-``            - JSON from stdin.
    * ``*.csv`` file   - one record per row; cells stay text, empty cells are
                         absent fields.
    * other file       - JSON document.
    * anything else    - JSON literal.

    The second item of the returned pair tells whether *source* held a
    sequence of records (a JSON array or CSV rows) rather than one record.
    """
    if source == "-":
        data = json.load(sys.stdin)
    else:
        p = Path(source)
        if p.is_file() and p.suffix.lower() == ".csv":
            frame = pd.read_csv(p, dtype=str, keep_default_na=False)
            rows = frame.to_dict(orient="records")
            return [{k: v for k, v in row.items() if v != ""} for row in rows], True
        if p.is_file():
            data = loader.load_json(p)
        else:
            try:
                data = json.loads(source)
            except json.JSONDecodeError as exc:
                raise ValueError(f"INPUT is neither a file nor valid JSON: {source!r}") from exc
    if isinstance(data, list):
        return data, True
    return [data], False

# --------------------------------------------------------------------------- #
# Output                                                                      #
# --------------------------------------------------------------------------- #

def _render(results: List[dict], validator: Validator, fmt: str, many: bool) -> str:
    if fmt == "markdown":
        return "\n\n---\n\n".join(to_markdown_card(r) for r in results)
    if fmt == "csv":
        cols = columns(validator.schema)
        frame = pd.DataFrame([row_values(r, cols) for r in results], columns=cols)
        return frame.to_csv(index=False).rstrip("\n")
    payload: Any = results if many else results[0]
    return json.dumps(payload, indent=2)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        validator = Validator.from_file(args.schema)
        records, many = read_records(args.input)
    except (FileNotFoundError, SchemaError, ValueError) as exc:
        parser.error(str(exc))

    log.info("validating %d record(s) against %s", len(records), args.schema)
    results = validator.validate_many(records)
    print(_render(results, validator, args.format, many))

    bad = sum(not is_valid(r) for r in results)
    if bad:
        log.info("%d of %d record(s) failed validation", bad, len(results))
    return 0 if bad == 0 else 1
