"""Tests for the swim-css command in swim_css_mcp_server/cli/calculate.py"""

import json

from swim_css_mcp_server.cli.calculate import main


def test_cli_prints_report(capsys):
    """Test the text report for a valid test set."""
    assert main(["3:28", "7:20"]) == 0
    out = capsys.readouterr().out
    assert "CRITICAL SWIM SPEED" in out
    assert "CSS:            1:56/100" in out
    assert "200m pace:      1:44/100" in out
    assert "400m pace:      1:50/100" in out


def test_cli_json_output(capsys):
    """Test the JSON output."""
    assert main(["208.5", "440.5", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["css"] == 116
    assert payload["pace200"] == 104.25
    assert payload["pace400"] == 110.125
    assert payload["trials"][0]["min_sec"] == "3:28.5"


def test_cli_reports_input_error(capsys):
    """Test that bad seconds are reported against the offending trial."""
    assert main(["3:65", "7:20"]) == 1
    out = capsys.readouterr().out
    assert "Error: 200m time '3:65': Seconds must be less than 60" in out


def test_cli_reports_range_error(capsys):
    """Test a time outside the default limits."""
    assert main(["1:39", "7:20"]) == 1
    assert "Time must be at least 1:40" in capsys.readouterr().out


def test_cli_reports_calculation_error(capsys):
    """Test an error that only shows up once both times are known."""
    assert main(["4:00", "6:40"]) == 1
    assert "Error: 400m pace cannot be faster than 200m pace" in capsys.readouterr().out


def test_cli_lenient_flag(capsys):
    """Test that --lenient accepts times outside the limits."""
    assert main(["1:39", "7:20", "--lenient", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["css"] == 170.5


def test_cli_lenient_still_rejects_bad_format(capsys):
    """Test that lenient mode does not accept malformed input."""
    assert main(["abc", "7:20", "--lenient"]) == 1
    assert "Invalid time format" in capsys.readouterr().out


def test_cli_env_file_limits(tmp_path, capsys):
    """Test limits loaded from an --env-file."""
    env_file = tmp_path / "limits.env"
    env_file.write_text("CSS_TIME200_MIN=90\n")
    assert main(["1:35", "7:20", "--env-file", str(env_file), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["pace200"] == 47.5


def test_cli_invalid_configuration(monkeypatch, capsys):
    """Test a non-numeric limit in the environment."""
    monkeypatch.setenv("CSS_TIME200_MAX", "six minutes")
    assert main(["3:28", "7:20"]) == 1
    assert "Error: CSS_TIME200_MAX" in capsys.readouterr().out
