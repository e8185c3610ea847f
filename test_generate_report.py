#!/usr/bin/env python3
"""
Test the command-line entry point.

Run with: pytest test_generate_report.py -v
"""
import pytest

from generate_report import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("CR_CONFIG", "COUNTRY_REPORT_CONFIG"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_from_working_directory(tmp_path, monkeypatch):
    """No arguments: week8countries.txt -> matches/data.txt in the cwd."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "week8countries.txt").write_text("Chad\nZambia\n")

    assert main([]) == 0

    report = (tmp_path / "matches" / "data.txt").read_text()
    assert report.startswith("\nCountry names longer than 10 characters:\n")
    assert "\nAny country name starts with 'Z':\ntrue\n" in report


def test_explicit_paths(tmp_path):
    input_path = tmp_path / "in.txt"
    input_path.write_text("Peru\n")
    output_path = tmp_path / "reports" / "peru.txt"

    assert main(["--input", str(input_path), "-o", str(output_path), "-v"]) == 0
    assert "\nTotal count of country names:\n1\n" in output_path.read_text()


def test_set_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "week8countries.txt").write_text("Peru\n")

    assert main(["--set", "report.output_path=custom/out.txt"]) == 0
    assert (tmp_path / "custom" / "out.txt").exists()
    assert not (tmp_path / "matches").exists()


def test_missing_input_exit_code(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main([]) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error processing file: ")
    assert "week8countries.txt" in err
    assert not (tmp_path / "matches" / "data.txt").exists()


def test_bad_config_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "week8countries.txt").write_text("Chad\n")

    assert main(["--config", str(tmp_path / "missing.yaml")]) == 0
    assert (tmp_path / "matches" / "data.txt").exists()


def test_unknown_encoding_falls_back_to_defaults(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "week8countries.txt").write_text("Chad\n", encoding="utf-8")

    assert main(["--set", "report.encoding=nosuchcodec"]) == 0

    assert "nosuchcodec" in caplog.text
    assert "\nTotal count of country names:\n1\n" in (tmp_path / "matches" / "data.txt").read_text()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
