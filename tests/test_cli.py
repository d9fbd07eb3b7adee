"""Tests for the durafmt command line interface."""

from pathlib import Path

from typer.testing import CliRunner

from durafmt.cli import app
from durafmt.cli_utils import EXIT_CONFIG_ERROR, EXIT_ERROR

runner = CliRunner()


class TestFormattingCommands:
    """Tests for the formatting commands."""

    def test_words(self) -> None:
        result = runner.invoke(app, ["words", "93784000", "--lang", "en"])
        assert result.exit_code == 0
        assert "1 day 2 hours 3 minutes 4 seconds" in result.output

    def test_words_german(self) -> None:
        result = runner.invoke(app, ["words", "93784000", "-l", "de"])
        assert result.exit_code == 0
        assert "1 Tag 2 Stunden 3 Minuten 4 Sekunden" in result.output

    def test_words_negative(self) -> None:
        """Negative durations are accepted without a '--' separator."""
        result = runner.invoke(app, ["words", "-5", "--lang", "en"])
        assert result.exit_code == 0
        assert "-5 ms" in result.output

    def test_clock_negative(self) -> None:
        result = runner.invoke(app, ["clock", "-1500"])
        assert result.exit_code == 0
        assert "-1s" in result.output

    def test_clock(self) -> None:
        result = runner.invoke(app, ["clock", "3723000"])
        assert result.exit_code == 0
        assert "1h 02min 03s" in result.output

    def test_hhmm(self) -> None:
        result = runner.invoke(app, ["hhmm", "19800000"])
        assert result.exit_code == 0
        assert "05:30" in result.output

    def test_hms_with_millis(self) -> None:
        result = runner.invoke(app, ["hms", "3723456", "--millis"])
        assert result.exit_code == 0
        assert "01:02:03.456" in result.output

    def test_weeks(self) -> None:
        result = runner.invoke(app, ["weeks", "10"])
        assert result.exit_code == 0
        assert "1 weeks, 3 days" in result.output

    def test_date(self) -> None:
        result = runner.invoke(app, ["date", "0", "--zone", "UTC", "--lang", "de"])
        assert result.exit_code == 0
        assert "01.01.70, 00:00" in result.output

    def test_date_only(self) -> None:
        result = runner.invoke(app, ["date", "0", "-z", "UTC", "-l", "en", "--date-only"])
        assert result.exit_code == 0
        assert "1/1/70" in result.output

    def test_date_unknown_zone(self) -> None:
        result = runner.invoke(app, ["date", "0", "--zone", "Nowhere/Special"])
        assert result.exit_code == EXIT_ERROR


class TestParseCommand:
    """Tests for the parse command."""

    def test_parse(self) -> None:
        result = runner.invoke(app, ["parse", "5:30"])
        assert result.exit_code == 0
        assert "05:30 (19800000 ms)" in result.output

    def test_parse_without_colon(self) -> None:
        result = runner.invoke(app, ["parse", "bad"])
        assert result.exit_code == EXIT_ERROR

    def test_parse_non_numeric(self) -> None:
        result = runner.invoke(app, ["parse", "1:2:3"])
        assert result.exit_code == EXIT_ERROR

    def test_parse_out_of_range(self) -> None:
        result = runner.invoke(app, ["parse", "99999999999:00"])
        assert result.exit_code == EXIT_ERROR
        assert not isinstance(result.exception, OverflowError)


class TestGlobalOptions:
    """Tests for --config and --version."""

    def test_config_sets_default_language(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("language: de\n")
        result = runner.invoke(app, ["--config", str(config_file), "words", "3600000"])
        assert result.exit_code == 0
        assert "1 Stunde" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "missing.yaml"), "weeks", "1"])
        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "durafmt" in result.output
