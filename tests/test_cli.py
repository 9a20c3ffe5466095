"""Test the click command-line interface."""

import pytest
from click.testing import CliRunner

from line_opener.src.cli import cli
from line_opener.src.formatter import format_lines
from line_opener.src.position import Direction
from line_opener.src.reader import LineExtraction


@pytest.fixture
def runner(tmp_path, monkeypatch):
    """CliRunner working inside tmp_path so no real config is picked up."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def test_read_default(runner, four_lines):
    result = runner.invoke(cli, ["read", four_lines])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["hello", "there", "whats", "up"]


def test_read_backward_numbered(runner, four_lines):
    result = runner.invoke(cli, ["read", four_lines, "-p", "end", "-d", "backward", "-m", "3", "-n"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["4: up", "3: whats"]


def test_read_invalid_direction_exits_with_error(runner, four_lines):
    result = runner.invoke(cli, ["read", four_lines, "-d", "backward"])
    assert result.exit_code == 1
    assert 'Cannot go "backwards" from the "start" position.' in result.output


def test_read_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["read", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "File error" in result.output


def test_read_uses_config_defaults(runner, four_lines):
    assert runner.invoke(cli, ["init"]).exit_code == 0
    config_file = ".line-opener/config.yaml"
    with open(config_file, encoding="utf-8") as f:
        text = f.read()
    text = text.replace("position: start", "position: end").replace("direction: forward", "direction: backward")
    with open(config_file, "w", encoding="utf-8") as f:
        f.write(text)

    result = runner.invoke(cli, ["read", four_lines])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["up", "whats", "there", "hello"]


def test_count_and_offset(runner, four_lines):
    result = runner.invoke(cli, ["count", four_lines])
    assert result.exit_code == 0
    assert result.output.strip() == "4"

    result = runner.invoke(cli, ["offset", four_lines, "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "12"


def test_offset_rejects_line_zero(runner, four_lines):
    result = runner.invoke(cli, ["offset", four_lines, "0"])
    assert result.exit_code != 0


def test_init_and_cleanup(runner):
    result = runner.invoke(cli, ["init"])
    assert result.exit_code == 0
    assert "Configuration initialized" in result.output

    result = runner.invoke(cli, ["init"])
    assert "already exists" in result.output

    result = runner.invoke(cli, ["cleanup"], input="y\n")
    assert result.exit_code == 0
    assert "Cleanup complete" in result.output


def test_format_lines_alignment():
    extraction = LineExtraction(["a", "b", "c"], start_line=10, total_lines=12)
    assert format_lines(extraction) == ["a", "b", "c"]
    assert format_lines(extraction, numbered=True, separator=" | ") == ["10 | a", "11 | b", "12 | c"]

    backward = LineExtraction(["x", "y"], start_line=10, direction=Direction.BACKWARD)
    assert format_lines(backward, numbered=True) == ["10: x", " 9: y"]


def test_read_unknown_encoding_reports_error(runner, four_lines):
    result = runner.invoke(cli, ["read", four_lines, "--encoding", "no-such-codec"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "❌ Error: File error" in result.output


def test_bad_chunk_size_env_does_not_break_commands(runner, four_lines, monkeypatch):
    monkeypatch.setenv("LINE_OPENER_CHUNK_SIZE", "abc")
    result = runner.invoke(cli, ["read", four_lines, "-p", "end", "-d", "backward"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["up", "whats", "there", "hello"]
