"""Tests for the validate command group."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from getflowkit.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestValidateCommands:
    @pytest.mark.parametrize(
        "command,value",
        [
            ("card", "1234-5678-9012-3456"),
            ("license", "서울12가123456"),
            ("business", "123-45-67890"),
            ("jumin", "9001011234568"),
            ("password", "abc12345"),
        ],
    )
    def test_valid_values_exit_zero(self, cli_runner: CliRunner, command: str, value: str) -> None:
        result = cli_runner.invoke(cli, ["validate", command, value])
        assert result.exit_code == 0, result.output
        assert f"OK: validate_{command}" in result.output

    @pytest.mark.parametrize(
        "command,value",
        [
            ("card", "1234567890123456"),
            ("license", "서울12가12345"),
            ("business", "1234567890"),
            ("jumin", "9001011234567"),
            ("password", "short1"),
        ],
    )
    def test_invalid_values_exit_one(
        self, cli_runner: CliRunner, command: str, value: str
    ) -> None:
        result = cli_runner.invoke(cli, ["validate", command, value])
        assert result.exit_code == 1
        assert f"ERROR: validate_{command}" in result.output

    def test_password_policy_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["validate", "password", "abc12345", "--policy", "only-letters"]
        )
        assert result.exit_code == 1
        assert "only-letters" in result.output

    def test_password_default_policy_reported(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "password", "abc12345"])
        assert result.exit_code == 0
        assert "policy: letters-and-digits" in result.output

    def test_unknown_policy_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "password", "abc12345", "--policy", "nope"])
        assert result.exit_code == 2

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "jumin", "9001011234568"])
        assert result.exit_code == 0
        parsed = json.loads(result.output)
        assert parsed["ok"] is True
        assert parsed["op"] == "validate_jumin"

    def test_json_error_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "card", "nope"])
        assert result.exit_code == 1
        parsed = json.loads(result.output)
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "ValidationError"
        assert parsed["error"]["detail"] == {"field": "credit_card_number"}

    def test_help_lists_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "jumin", "--help"])
        assert result.exit_code == 0
        assert "Examples:" in result.output
        assert "  getflowkit validate jumin 9001011234568" in result.output

    def test_group_help_lists_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--help"])
        assert result.exit_code == 0
        expected = "getflowkit validate password s3cretpass --policy letters-and-digits"
        assert expected in result.output


@pytest.mark.usefixtures("_isolated_config")
class TestConfigDrivenPolicy:
    def test_policy_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "getflowkit.toml").write_text(
            '[validation]\npassword_policy = "only-letters"\n'
        )
        result = cli_runner.invoke(cli, ["validate", "password", "abc12345"])
        assert result.exit_code == 1
        assert "only-letters" in result.output

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[validation]\npassword_policy = "uppercase-letters-and-digits"\n')
        result = cli_runner.invoke(cli, ["-c", str(config), "validate", "password", "ABC12345"])
        assert result.exit_code == 0
        assert "uppercase-letters-and-digits" in result.output

    def test_env_var_policy(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GETFLOWKIT_VALIDATION__PASSWORD_POLICY", "only-letters")
        result = cli_runner.invoke(cli, ["validate", "password", "abcdefgh"])
        assert result.exit_code == 0
        assert "only-letters" in result.output
