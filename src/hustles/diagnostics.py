"""Advisory checks on parsed records: required keys and structure summaries."""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from hustles.schema import HUSTLE_COLUMNS, HUSTLE_NUMERIC_COLUMNS
from hustles.types import Dataset

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 5


@dataclass
class StructureSummary:
    properties: list[str] = field(default_factory=list)
    types: dict[str, str] = field(default_factory=dict)
    sample_count: int = 0


def type_name(value: Any) -> str:
    """Runtime type label used in summaries: number, boolean, string or the class name."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    return type(value).__name__


def validate_record(record: Mapping[str, Any] | None, required_keys: Iterable[str] = ()) -> bool:
    """Check that ``record`` is a mapping holding every key in ``required_keys``.

    With no required keys the record only needs at least one key.
    """
    if record is None or not isinstance(record, Mapping):
        logger.warning("Record is not a mapping: %r", record)
        return False

    required = list(required_keys)
    if not required:
        logger.debug("Record has %d keys", len(record))
        return len(record) > 0

    missing = [key for key in required if key not in record]
    if missing:
        logger.warning("Record missing required keys: %s", ", ".join(missing))
        return False
    return True


def validate_hustle(record: Mapping[str, Any] | None) -> bool:
    """Check a side hustle record for its columns and numeric fields."""
    if not validate_record(record, HUSTLE_COLUMNS):
        return False

    for key in HUSTLE_NUMERIC_COLUMNS:
        if type_name(record[key]) != "number":
            logger.warning("Property %s should be a number, got %r", key, record[key])
            return False
    return True


def analyze_dataset(dataset: Dataset) -> StructureSummary:
    """Summarize property names and their dominant types from the first records."""
    if not dataset:
        return StructureSummary()

    properties = list(dataset[0])
    sample = dataset[:SAMPLE_SIZE]
    types: dict[str, str] = {}

    for prop in properties:
        seen = [type_name(rec[prop]) if prop in rec else "missing" for rec in sample]
        # Counter keeps first-seen order, so max() breaks ties by sample order.
        counts = Counter(seen)
        types[prop] = max(counts, key=counts.__getitem__)

    summary = StructureSummary(properties=properties, types=types, sample_count=len(sample))
    logger.debug("Structure: %s", summary)
    return summary
