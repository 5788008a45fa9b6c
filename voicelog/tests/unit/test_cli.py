"""Unit tests for the command-line host."""

import io
import json
import sys
from pathlib import Path

import pytest

from voicelog.application.summaries import REPHRASE_PROMPT
from voicelog.cli import (
    EXIT_OK,
    EXIT_PARSE_ERROR,
    EXIT_UNKNOWN,
    exit_code_for,
    main,
    run_interactive,
)
from voicelog.domain.commands import ParsedWaterCommand, ParseError, Unknown, WaterResult


@pytest.fixture(autouse=True)
def isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run without a stray .env in the working directory."""
    monkeypatch.chdir(tmp_path)


class TestExitCodes:
    """Test exit code mapping."""

    def test_mapping(self) -> None:
        """Test committed, error and unknown results."""
        water = WaterResult(payload=ParsedWaterCommand(amount=237, spoken_unit="ounces"))
        error = ParseError(original_command="x", error_message="y")

        assert exit_code_for(water) == EXIT_OK
        assert exit_code_for(error) == EXIT_PARSE_ERROR
        assert exit_code_for(Unknown(command="x")) == EXIT_UNKNOWN


class TestMain:
    """Test single-command invocations."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test words are joined and the result printed as JSON."""
        assert main(["drank", "16", "oz", "of", "water"]) == EXIT_OK

        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "water"
        assert data["payload"]["amount"] == 473

    def test_parse_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a ParseError exits with 1."""
        assert main(["log my weight"]) == EXIT_PARSE_ERROR

        data = json.loads(capsys.readouterr().out)
        assert data["kind"] == "parse_error"
        assert data["failed_intent"] == "weight"

    def test_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an Unknown result exits with 2."""
        assert main(["hello"]) == EXIT_UNKNOWN
        assert json.loads(capsys.readouterr().out)["kind"] == "unknown"

    def test_describe(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --describe prints the confirmation message."""
        assert main(["--describe", "drank 16 oz of water"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "Logged 473 ml of water"

    def test_pretty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --pretty indents the JSON."""
        main(["--pretty", "log water"])

        out = capsys.readouterr().out
        assert '\n  "kind": "water"' in out

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test usage is printed when nothing is given."""
        assert main([]) == EXIT_UNKNOWN
        assert "usage" in capsys.readouterr().err

    def test_env_file(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test --env-file settings reach logging."""
        monkeypatch.setenv("VOICELOG_LOG_LEVEL", "placeholder")
        monkeypatch.delenv("VOICELOG_LOG_LEVEL")
        monkeypatch.setenv("VOICELOG_LOG_FORMAT", "json")
        env_file = tmp_path / "voicelog.env"
        env_file.write_text("VOICELOG_LOG_LEVEL=DEBUG\n")

        main(["--env-file", str(env_file), "log water"])

        lines = capsys.readouterr().err.splitlines()
        events = [json.loads(line)["event"] for line in lines if line.startswith("{")]
        assert "command_classified" in events


class TestInteractive:
    """Test line-by-line mode."""

    def test_lines(self) -> None:
        """Test blank lines are skipped and the last code is returned."""
        stdin = io.StringIO("log water\n\nhello\n")
        stdout = io.StringIO()

        code = run_interactive(stdin, stdout, pretty=False, as_text=True)

        assert code == EXIT_UNKNOWN
        assert stdout.getvalue().splitlines() == ["Logged 237 ml of water", REPHRASE_PROMPT]

    def test_main_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --interactive reads sys.stdin."""
        monkeypatch.setattr(sys, "stdin", io.StringIO("slept 7 hours\n"))

        assert main(["--interactive"]) == EXIT_OK
        assert json.loads(capsys.readouterr().out)["kind"] == "sleep"

    def test_empty_input(self) -> None:
        """Test no lines means success."""
        assert run_interactive(io.StringIO(""), io.StringIO(), pretty=False, as_text=False) == EXIT_OK
