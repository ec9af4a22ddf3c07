"""Shared test fixtures."""

import pytest

from hustles import StaticTextSource

HUSTLE_CSV = """name,partner_org,impact_per_hour,training_time
Storytime Reader,Public Library,10,1
Book Drive Sorter,Public Library,40,0.5
Elder Tech Setup,Senior Center,3,1.5
"""


@pytest.fixture
def hustle_csv():
    return HUSTLE_CSV


@pytest.fixture
def csv_dir(tmp_path):
    """A directory holding a small side hustle CSV file."""
    (tmp_path / "hustles.csv").write_text(HUSTLE_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def static_source():
    """Provide an in-memory source with one good and one empty document."""
    return StaticTextSource({"hustles.csv": HUSTLE_CSV, "empty.csv": ""})
