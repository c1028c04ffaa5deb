"""Tests for the gstconf command-line interface."""

import json
from io import StringIO

import pytest
from click.testing import CliRunner

from gstconf.cli import gstconf
from gstconf.commands.parse_cmd import get_output_format
from gstconf.report import OutputFormat
from gstconf.utils.logger import Logger
from gstconf.version import GSTCONF_VERSION

CONFIG = """\
actions:
  - name: gemm
    module: gst
    count: 4
    parallel: true
  - name: idle
"""


@pytest.fixture(autouse=True)
def quiet_logger():
    """Send CLI logging to a buffer so stdout only carries command output."""
    Logger.configure(level="WARNING", output=StringIO(), timestamps=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "gst.yaml"
    path.write_text(CONFIG)
    return path


def test_parse_text(config_file):
    result = CliRunner().invoke(gstconf, ["parse", str(config_file)])
    assert result.exit_code == 0, result.output
    assert "[1] gemm" in result.output
    assert "[2] idle" in result.output


def test_parse_json(config_file):
    result = CliRunner().invoke(gstconf, ["parse", str(config_file), "-f", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [a["name"] for a in data["actions"]] == ["gemm", "idle"]
    assert data["actions"][0]["count"] == 4


def test_parse_to_json_file(config_file, tmp_path):
    out = tmp_path / "out.json"
    result = CliRunner().invoke(gstconf, ["parse", str(config_file), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "Wrote 2 action(s)" in result.output
    assert json.loads(out.read_text())["summary"]["parallel_actions"] == 1


def test_parse_unknown_key_fails(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("actions:\n  - name: a\n    bogus: 1\n")
    result = CliRunner().invoke(gstconf, ["parse", str(path)])
    assert result.exit_code == 1
    assert "Unexpected key 'bogus'" in result.output


def test_parse_strict_flag(tmp_path):
    path = tmp_path / "lenient.yaml"
    path.write_text("actions:\n  - name: a\n    count: many\n")

    assert CliRunner().invoke(gstconf, ["parse", str(path)]).exit_code == 0

    result = CliRunner().invoke(gstconf, ["parse", str(path), "--strict"])
    assert result.exit_code == 1
    assert "count" in result.output


def test_parse_missing_file(tmp_path):
    result = CliRunner().invoke(gstconf, ["parse", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_validate(config_file):
    result = CliRunner().invoke(gstconf, ["validate", str(config_file)])
    assert result.exit_code == 0
    assert "defines 2 action(s)" in result.output


def test_validate_debug_env_logs_transitions(config_file, monkeypatch):
    monkeypatch.setenv("GSTCONF_DEBUG", "1")
    log_output = StringIO()
    Logger.configure(level="WARNING", output=log_output, timestamps=False)

    result = CliRunner().invoke(gstconf, ["validate", str(config_file)])

    assert result.exit_code == 0, result.output
    assert "[gstconf.parser.trace]" in log_output.getvalue()
    assert "-> Stop" in log_output.getvalue()


def test_validate_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("actions: [\n")
    result = CliRunner().invoke(gstconf, ["validate", str(path)])
    assert result.exit_code == 1
    assert "Malformed YAML" in result.output


def test_version():
    result = CliRunner().invoke(gstconf, ["version"])
    assert result.exit_code == 0
    assert f"gstconf {GSTCONF_VERSION}" in result.output


def test_get_output_format():
    assert get_output_format(None, None) is OutputFormat.TEXT
    assert get_output_format("out.json", None) is OutputFormat.JSON
    assert get_output_format("out.txt", None) is OutputFormat.TEXT
    assert get_output_format("out.json", "text") is OutputFormat.TEXT
