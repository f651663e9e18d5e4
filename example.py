# example.py
"""
Walk-through of the object-validator API:

1. **Schema authoring**: type tags, predicates, enums, arrays, composites
   and nested schemas in one mapping
2. **Validation**: one result tree per record
3. **Reporting**: failing paths and a Markdown card
4. **Tabular data**: validate a DataFrame row by row
"""
from __future__ import annotations

import enum
import logging

import pandas as pd

from object_validator import Validator, failures, is_valid, to_markdown_card
from object_validator.frame import validate_frame

# --------------------------------------------------------------------------- #
# Logging Configuration                                                       #
# --------------------------------------------------------------------------- #
logging.basicConfig(
    level="INFO",
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger("object_validator.examples")


class Status(enum.Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


def is_positive(value) -> bool:
    return value > 0


# --------------------------------------------------------------------------- #
# Step 1: Author the schema                                                   #
# --------------------------------------------------------------------------- #
validator = Validator({
    "name":     "string",
    "status":   Status,
    "balance":  ["number", is_positive],
    "tags":     {"itemType": "string"},
    "deleted":  "undefined",
    "address": {
        "city": "string",
        "zip":  lambda v: isinstance(v, str) and v.isdigit(),
    },
})

# --------------------------------------------------------------------------- #
# Step 2: Validate a record                                                   #
# --------------------------------------------------------------------------- #
record = {
    "name": "Ada",
    "status": "active",
    "balance": -12.5,
    "tags": ["vip"],
    "address": {"city": "London"},
}
result = validator.validate(record)
log.info("valid=%s failures=%s", is_valid(result), failures(result))

# --------------------------------------------------------------------------- #
# Step 3: Report                                                              #
# --------------------------------------------------------------------------- #
print(to_markdown_card(result))

# --------------------------------------------------------------------------- #
# Step 4: Tabular data                                                        #
# --------------------------------------------------------------------------- #
frame = pd.DataFrame({
    "name": ["Ada", "Bob"],
    "status": ["active", "closed"],
    "balance": [10.0, 3.0],
    "tags": [["vip"], []],
    "address": [{"city": "London", "zip": "12345"}, None],
})
print(validate_frame(validator, frame))
