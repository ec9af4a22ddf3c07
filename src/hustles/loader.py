"""Acquire CSV text from a source and parse it into a dataset."""

import logging

from hustles.parser import ParserConfig, parse_csv
from hustles.schema import SIDE_HUSTLES_CSV
from hustles.sources import SourceUnavailableError, TextSource
from hustles.types import Dataset

logger = logging.getLogger(__name__)


def load_dataset(source: TextSource, name: str, config: ParserConfig | None = None) -> Dataset:
    """Read ``name`` from ``source`` and parse it.

    An unreachable source is logged and yields an empty dataset; the parser is
    not invoked in that case.
    """
    logger.info("Loading data from %s...", name)
    try:
        text = source.read_text(name)
    except SourceUnavailableError as e:
        logger.error("Error loading CSV file: %s", e)
        return []

    dataset = parse_csv(text, config)
    logger.info("Successfully loaded %d records from %s", len(dataset), name)
    return dataset


def dataset_from_text(text: str, config: ParserConfig | None = None) -> Dataset:
    """Parse CSV text that is already in memory."""
    logger.info("Creating dataset from embedded data...")
    dataset = parse_csv(text, config)
    logger.info("Successfully created dataset with %d records", len(dataset))
    return dataset


def load_side_hustles(config: ParserConfig | None = None) -> Dataset:
    """Parse the side hustle sample data bundled with the package."""
    return dataset_from_text(SIDE_HUSTLES_CSV, config)
