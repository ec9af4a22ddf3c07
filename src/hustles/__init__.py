"""Side hustle CSV parsing: source factory and public API."""

from hustles.diagnostics import StructureSummary, analyze_dataset, validate_hustle, validate_record
from hustles.loader import dataset_from_text, load_dataset, load_side_hustles
from hustles.parser import (
    ParseMode,
    ParserConfig,
    RowPolicy,
    coerce_number,
    dump_csv,
    infer_value,
    normalize_header,
    parse_csv,
)
from hustles.sources import (
    FileTextSource,
    HttpTextSource,
    SourceUnavailableError,
    StaticTextSource,
    TextSource,
)
from hustles.types import CellValue, Dataset, Record


def create_source(location: str | None = None, **kwargs) -> TextSource:
    """Create a TextSource from a location.

    Supported forms:
    - http://host/path or https://host/path  -> HttpTextSource rooted there
    - a directory path, or None for the working directory -> FileTextSource

    Keyword arguments configure HttpTextSource (timeout, retries) and are
    ignored for file locations.
    """
    if location and location.startswith(("http://", "https://")):
        return HttpTextSource(location, **kwargs)
    return FileTextSource(location)


__all__ = [
    "CellValue",
    "Dataset",
    "FileTextSource",
    "HttpTextSource",
    "ParseMode",
    "ParserConfig",
    "Record",
    "RowPolicy",
    "SourceUnavailableError",
    "StaticTextSource",
    "StructureSummary",
    "TextSource",
    "analyze_dataset",
    "coerce_number",
    "create_source",
    "dataset_from_text",
    "dump_csv",
    "infer_value",
    "load_dataset",
    "load_side_hustles",
    "normalize_header",
    "parse_csv",
    "validate_hustle",
    "validate_record",
]
