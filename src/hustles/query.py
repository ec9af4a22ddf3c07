"""Filtering and ordering helpers over parsed datasets."""

from hustles.diagnostics import type_name
from hustles.types import CellValue, Dataset


def filter_by(dataset: Dataset, key: str, value: CellValue) -> Dataset:
    """Records whose ``key`` equals ``value`` (strings compared case-insensitively).

    Booleans and numbers never match each other.
    """
    if isinstance(value, str):
        wanted = value.strip().lower()
        return [
            rec for rec in dataset if isinstance(rec.get(key), str) and rec[key].lower() == wanted
        ]
    wanted_type = type_name(value)
    return [
        rec
        for rec in dataset
        if key in rec and type_name(rec[key]) == wanted_type and rec[key] == value
    ]


def sort_by(dataset: Dataset, key: str, descending: bool = False) -> Dataset:
    """Stable sort on ``key``. Records without the key, or with an empty value, go last.

    Numeric columns sort numerically; anything else sorts by string form.
    """
    present = [rec for rec in dataset if rec.get(key, "") != ""]
    absent = [rec for rec in dataset if rec.get(key, "") == ""]

    numeric = all(
        isinstance(rec[key], (int, float)) and not isinstance(rec[key], bool) for rec in present
    )
    if numeric:
        ordered = sorted(present, key=lambda rec: rec[key], reverse=descending)
    else:
        ordered = sorted(present, key=lambda rec: str(rec[key]).lower(), reverse=descending)
    return ordered + absent


def take(dataset: Dataset, n: int) -> Dataset:
    """The first ``n`` records."""
    return list(dataset[: max(0, n)])
