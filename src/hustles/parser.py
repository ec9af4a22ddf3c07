"""Delimited text to records, with header normalization and cell type inference."""

import logging
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from hustles.schema import HUSTLE_NUMERIC_COLUMNS
from hustles.types import CellValue, Dataset, Record

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)$", re.ASCII)
_NUMBER_PREFIX_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^a-z0-9_]")
_UNDERSCORES_RE = re.compile(r"_{2,}")


class ParseMode(str, Enum):
    INFER = "infer"
    SCHEMA = "schema"


class RowPolicy(str, Enum):
    PAD = "pad"
    DROP = "drop"


@dataclass(frozen=True)
class ParserConfig:
    """How a parse call treats headers, cells and ragged rows.

    - INFER mode normalizes headers and guesses number/boolean/string per cell.
    - SCHEMA mode keeps headers as written (trimmed) and only coerces
      ``numeric_columns``, substituting 0.0 for unparsable values.
    - ``row_policy`` applies to every row of a parse: PAD repairs rows with the
      wrong number of values, DROP skips them.
    """

    mode: ParseMode = ParseMode.INFER
    row_policy: RowPolicy = RowPolicy.PAD
    numeric_columns: tuple[str, ...] = field(default_factory=tuple)
    delimiter: str = ","

    @classmethod
    def hustle_schema(cls) -> "ParserConfig":
        """Legacy side hustle parsing: fixed numeric columns, mismatched rows dropped."""
        return cls(
            mode=ParseMode.SCHEMA,
            row_policy=RowPolicy.DROP,
            numeric_columns=tuple(HUSTLE_NUMERIC_COLUMNS),
        )


def normalize_header(header: str) -> str:
    """Turn a raw header cell into a lowercase, underscore-delimited key.

    "  Impact Per Hour " -> "impact_per_hour". Applying it twice changes nothing.
    """
    key = _WHITESPACE_RE.sub("_", header.strip().lower())
    key = _UNSAFE_RE.sub("", key).strip("_")
    return _UNDERSCORES_RE.sub("_", key)


def infer_value(raw: str) -> CellValue:
    """Classify a cell as number, boolean or string.

    Digit strings too large for a float stay strings.
    """
    value = raw.strip()
    if value == "":
        return ""
    if _NUMBER_RE.match(value):
        number = float(value)
        if math.isfinite(number):
            return number
        return value
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


def coerce_number(raw: str) -> float | None:
    """Parse the leading numeric part of ``raw`` ("3.5 hrs" -> 3.5), or None."""
    match = _NUMBER_PREFIX_RE.match(raw.strip())
    if match is None:
        return None
    return float(match.group())


def _split(line: str, delimiter: str) -> list[str]:
    return [cell.strip() for cell in line.split(delimiter)]


def _fit_row(values: list[str], width: int, row_num: int, policy: RowPolicy) -> list[str] | None:
    """Reconcile a row's length with the header width, or None to skip it."""
    if len(values) == width:
        return values
    if policy is RowPolicy.DROP:
        logger.warning(
            "Row %d has %d values but expected %d. Skipping row.", row_num, len(values), width
        )
        return None
    if len(values) < width:
        logger.warning(
            "Row %d has %d values but expected %d. Padding with empty values.",
            row_num,
            len(values),
            width,
        )
        return values + [""] * (width - len(values))
    logger.warning(
        "Row %d has %d values but expected %d. Dropping extra values.",
        row_num,
        len(values),
        width,
    )
    return values[:width]


def _convert(header: str, value: str, row_num: int, config: ParserConfig) -> CellValue:
    if config.mode is ParseMode.INFER:
        return infer_value(value)
    if header not in config.numeric_columns:
        return value
    number = coerce_number(value)
    if number is None:
        logger.warning("Invalid number %r in %s for row %d. Using 0.", value, header, row_num)
        return 0.0
    return number


def parse_csv(text: str, config: ParserConfig | None = None) -> Dataset:
    """Parse delimited text into a list of records.

    Blank lines are ignored, the first remaining line is the header. Never raises:
    empty input gives an empty list and malformed rows are handled per
    ``config.row_policy``.
    """
    config = config or ParserConfig()
    lines = [line for line in text.split("\n") if line.strip()]

    if not lines:
        logger.warning("CSV text appears to be empty")
        return []

    headers = _split(lines[0], config.delimiter)
    normalize = config.mode is ParseMode.INFER
    if normalize:
        headers = [normalize_header(h) for h in headers]
    for position, header in enumerate(headers, start=1):
        if header == "" and normalize:
            logger.warning("Header in column %d is empty after normalization", position)
        elif header == "":
            logger.warning("Header in column %d is empty", position)

    if len(lines) == 1:
        logger.info("CSV text has a header but no data rows")
        return []

    records: Dataset = []
    for row_num, line in enumerate(lines[1:], start=2):
        values = _fit_row(_split(line, config.delimiter), len(headers), row_num, config.row_policy)
        if values is None:
            continue

        record: Record = {}
        for header, value in zip(headers, values):
            record[header] = _convert(header, value, row_num, config)
        records.append(record)

    logger.debug("Parsed %d records with %d columns", len(records), len(headers))
    return records


def _format_value(value: CellValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Positional notation only; the number pattern has no exponents.
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(value)


def dump_csv(dataset: Dataset, delimiter: str = ",") -> str:
    """Serialize records back to delimited text, header taken from the first record."""
    if not dataset:
        return ""
    headers = list(dataset[0])
    lines = [delimiter.join(headers)]
    for record in dataset:
        lines.append(delimiter.join(_format_value(record.get(h, "")) for h in headers))
    return "\n".join(lines) + "\n"
