"""Tests for loading datasets from sources."""

import logging

from hustles import FileTextSource, ParserConfig, TextSource
from hustles.loader import dataset_from_text, load_dataset, load_side_hustles
from hustles.sources import SourceUnavailableError


class ExplodingSource(TextSource):
    def read_text(self, name: str) -> str:
        raise SourceUnavailableError(f"cannot reach {name}")


class TestLoadDataset:
    def test_load_from_static_source(self, static_source):
        dataset = load_dataset(static_source, "hustles.csv")
        assert len(dataset) == 3
        assert dataset[0]["impact_per_hour"] == 10.0

    def test_load_from_file(self, csv_dir):
        dataset = load_dataset(FileTextSource(csv_dir), "hustles.csv", ParserConfig.hustle_schema())
        assert [r["training_time"] for r in dataset] == [1.0, 0.5, 1.5]

    def test_unreachable_source_returns_empty(self, caplog):
        with caplog.at_level(logging.ERROR):
            dataset = load_dataset(ExplodingSource(), "remote.csv")
        assert dataset == []
        assert "cannot reach remote.csv" in caplog.text

    def test_missing_file_returns_empty(self, tmp_path):
        assert load_dataset(FileTextSource(tmp_path), "nope.csv") == []

    def test_empty_document(self, static_source):
        assert load_dataset(static_source, "empty.csv") == []

    def test_logs_progress(self, static_source, caplog):
        with caplog.at_level(logging.INFO):
            load_dataset(static_source, "hustles.csv")
        assert "Loading data from hustles.csv" in caplog.text
        assert "Successfully loaded 3 records" in caplog.text


class TestEmbeddedData:
    def test_dataset_from_text(self):
        assert dataset_from_text("a\ntrue\n") == [{"a": True}]

    def test_load_side_hustles(self):
        dataset = load_side_hustles()
        assert len(dataset) == 40
        assert dataset[0] == {
            "name": "Tutor Buddy Algebra",
            "partner_org": "Local Middle School",
            "impact_per_hour": 2.0,
            "training_time": 1.0,
        }

    def test_load_side_hustles_each_call_is_fresh(self):
        first = load_side_hustles()
        first.clear()
        assert len(load_side_hustles()) == 40
