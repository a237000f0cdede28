"""Tests for CLI module."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from marcrank.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
RECORDS = FIXTURES / "records"
CONFIGS = FIXTURES / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Provide Click test CLI runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Top-level CLI
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cli_version_flag(runner: CliRunner) -> None:
    """Test --version flag outputs version string."""
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "marcrank" in result.output


@pytest.mark.unit
def test_cli_help(runner: CliRunner) -> None:
    """Test --help output lists commands."""
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("rank", "sort", "validate", "features"):
        assert command in result.output


@pytest.mark.unit
def test_cli_invalid_command(runner: CliRunner) -> None:
    """Test invalid command returns non-zero exit code."""
    result = runner.invoke(cli, ["invalid-command"])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# rank command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_rank_prints_score(runner: CliRunner) -> None:
    """Test rank prints the signed score."""
    result = runner.invoke(
        cli,
        ["rank", str(RECORDS / "original_1975.json"), str(RECORDS / "reprint_1982.json"), "-c", str(CONFIGS / "basic.json")],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "3"


@pytest.mark.unit
def test_rank_reversed_pair_with_default_config(runner: CliRunner) -> None:
    """Test swapping the records negates the score."""
    result = runner.invoke(cli, ["rank", str(RECORDS / "reprint_1982.json"), str(RECORDS / "original_1975.json")])

    assert result.exit_code == 0
    assert result.output.strip() == "-6"


@pytest.mark.unit
def test_rank_explain(runner: CliRunner) -> None:
    """Test --explain prints the per-feature breakdown as JSON."""
    result = runner.invoke(
        cli,
        [
            "rank",
            str(RECORDS / "original_1975.json"),
            str(RECORDS / "reprint_1982.json"),
            "--config",
            str(CONFIGS / "basic.json"),
            "--explain",
        ],
    )

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["score"] == 3
    assert data["preferred"] == 1
    assert data["features"][0] == {"feature": "encodingLevel/notNull", "raw": [4, 2], "normalized": [0, 0]}
    assert data["features"][4]["raw"][0]["reprint_notes"] == ["Lisäpainokset: Repr. 1982."]


@pytest.mark.unit
def test_rank_missing_change_data_fails(runner: CliRunner) -> None:
    """Test ranking errors exit with status 1."""
    result = runner.invoke(
        cli,
        ["rank", str(RECORDS / "original_1975.json"), str(RECORDS / "no_008.json"), "-c", str(CONFIGS / "basic.json")],
    )

    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.unit
def test_rank_writes_events(runner: CliRunner, tmp_path: Path) -> None:
    """Test --events appends JSONL audit events."""
    events_path = tmp_path / "logs" / "events.jsonl"

    result = runner.invoke(
        cli,
        [
            "rank",
            str(RECORDS / "original_1975.json"),
            str(RECORDS / "no_008.json"),
            "--events",
            str(events_path),
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == "6"
    events = [json.loads(line) for line in events_path.read_text(encoding="utf-8").splitlines()]
    assert [e["event"] for e in events] == ["configuration_resolved", "pair_ranked"]
    assert len({e["run_id"] for e in events}) == 1


@pytest.mark.unit
def test_rank_missing_file(runner: CliRunner, tmp_path: Path) -> None:
    """Test nonexistent record file is rejected by argument validation."""
    result = runner.invoke(cli, ["rank", str(tmp_path / "missing.json"), str(RECORDS / "no_008.json")])

    assert result.exit_code != 0


# ---------------------------------------------------------------------------
# sort command
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_sort_prints_best_first(runner: CliRunner) -> None:
    """Test sort prints indices from most to least preferred."""
    result = runner.invoke(cli, ["sort", str(RECORDS / "duplicates.json")])

    assert result.exit_code == 0
    assert result.output.split() == ["2", "1", "0"]


@pytest.mark.unit
def test_sort_unknown_extractor_fails(runner: CliRunner) -> None:
    """Test configuration errors exit with status 1."""
    result = runner.invoke(cli, ["sort", str(RECORDS / "duplicates.json"), "-c", str(CONFIGS / "unknown_extractor.json")])

    assert result.exit_code == 1
    assert "shelfMark" in result.output


# ---------------------------------------------------------------------------
# validate and features commands
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_validate_ok(runner: CliRunner) -> None:
    """Test a valid configuration lists its features."""
    result = runner.invoke(cli, ["validate", str(CONFIGS / "basic.json")])

    assert result.exit_code == 0
    assert "Configuration OK (6 features)" in result.output
    assert "latestChangeByHuman(LOAD-, CONV-)/lexical" in result.output


@pytest.mark.unit
@pytest.mark.parametrize("name", ["invalid.json", "unknown_extractor.json"])
def test_validate_rejects_bad_configuration(runner: CliRunner, name: str) -> None:
    """Test schema and resolution failures exit with status 1."""
    result = runner.invoke(cli, ["validate", str(CONFIGS / name)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


@pytest.mark.unit
def test_features_lists_registries(runner: CliRunner) -> None:
    """Test built-in extractors and normalizers are listed."""
    result = runner.invoke(cli, ["features"])

    assert result.exit_code == 0
    assert "Extractors:" in result.output
    assert "Normalizers:" in result.output
    assert "latestChange: text (parameters)" in result.output
    assert "reprint: reprint" in result.output
