"""Tests for the messages CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from fieldrules.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestMessagesCommand:
    def test_lists_default_templates(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["messages"])
        assert result.exit_code == 0
        assert result.output.startswith("OK: messages")
        assert "  InvalidRange: Allowed range between {0} to {1}." in result.output
        assert "  overridden: []" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "messages"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["PropertyNotFound"] == "Property {0} not found."
        assert data["overridden"] == []

    def test_overrides_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fieldrules.toml").write_text(
            '[messages.overrides]\nInvalidType = "Not a number."\n'
        )
        result = cli_runner.invoke(cli, ["--json", "messages"])
        data = json.loads(result.output)["data"]
        assert data["InvalidType"] == "Not a number."
        assert data["overridden"] == ["InvalidType"]

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "alt.toml"
        custom.write_text('[messages.overrides]\nInvalidLength = "Wrong size."\n')
        result = cli_runner.invoke(cli, ["-c", str(custom), "messages"])
        assert "  InvalidLength: Wrong size." in result.output

    def test_unknown_override_key_fails(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fieldrules.toml").write_text('[messages.overrides]\nNope = "x"\n')
        result = cli_runner.invoke(cli, ["messages"])
        assert result.exit_code != 0

    def test_unformattable_template_fails_at_startup(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        (tmp_path / "fieldrules.toml").write_text(
            '[messages.overrides]\nInvalidRange = "Between {min} and {max}"\n'
        )
        result = cli_runner.invoke(cli, ["messages"])
        assert result.exit_code != 0
        assert result.stdout == ""
