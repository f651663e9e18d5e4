"""
object_validator – declarative, per-field validation of structured records.
"""
__version__ = "1.0.0"

from .types import UNDEFINED
from .validator import SchemaError, Validator
from .results import is_valid, failures, flatten
from .loader import load_schema
from .card import to_markdown_card

__all__ = [
    "UNDEFINED",
    "Validator",
    "SchemaError",
    "is_valid",
    "failures",
    "flatten",
    "load_schema",
    "to_markdown_card",
]
