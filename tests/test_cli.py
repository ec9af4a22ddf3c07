"""Tests for the load_hustles CLI."""

import pytest

from scripts.load_hustles import main


class TestLoadHustlesCli:
    def test_embedded_preview(self, capsys):
        assert main(["--embedded", "--limit", "2"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "name='Tutor Buddy Algebra', partner_org='Local Middle School', "
            "impact_per_hour=2.0, training_time=1.0",
            "name='Homework Helpline Text Review', partner_org='Community Center', "
            "impact_per_hour=3.0, training_time=0.5",
        ]

    def test_file_sorted_with_analysis(self, csv_dir, capsys):
        code = main(
            [
                "--source",
                str(csv_dir),
                "--name",
                "hustles.csv",
                "--mode",
                "schema",
                "--row-policy",
                "drop",
                "--sort",
                "impact_per_hour",
                "--descending",
                "--limit",
                "1",
                "--analyze",
            ]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines()[0].startswith("name='Book Drive Sorter'")
        assert "impact_per_hour: number" in out
        assert "sampled: 3" in out

    def test_source_from_environment(self, csv_dir, monkeypatch, capsys):
        monkeypatch.setenv("HUSTLES_SOURCE", str(csv_dir))
        assert main(["--name", "hustles.csv", "--limit", "1"]) == 0
        assert "Storytime Reader" in capsys.readouterr().out

    def test_missing_file_exit_code(self, tmp_path):
        assert main(["--source", str(tmp_path), "--name", "missing.csv"]) == 1

    def test_requires_name_or_embedded(self):
        with pytest.raises(SystemExit):
            main([])

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            main(["--embedded", "--log-level", "basic_format"])

    def test_log_level_is_case_insensitive(self, capsys):
        assert main(["--embedded", "--limit", "1", "--log-level", "warning"]) == 0
        assert "Tutor Buddy Algebra" in capsys.readouterr().out
