"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and don't crash. Uses Click's
CliRunner; every invocation points logging and config at a temp directory.
"""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from huecycle.cli.main import cli, setup_logging
from huecycle.models import AppConfig


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_args(temp_dir):
    """Root options that keep logs and config out of the home directory."""
    return ['--log-file', str(temp_dir / "huecycle.log"), '--config', str(temp_dir / "config.json")]


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'unique background colors' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["cycle", "tui", "color", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0

    def test_cycle_options(self, runner):
        result = runner.invoke(cli, ['cycle', '--help'])
        assert '--cycles' in result.output
        assert '--interval' in result.output
        assert '--label' in result.output
        assert '--max-retries' in result.output


@pytest.mark.integration
class TestCycleCommand:
    """Test the terminal cycle command."""

    def test_runs_requested_cycles(self, runner, base_args):
        result = runner.invoke(cli, base_args + ['cycle', '-n', '3', '-i', '0.01', '--label', '--seed', '1'])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[-1] == "3 colors shown"
        assert all(line.strip().startswith("#") for line in lines[:3])

    def test_config_file_defaults(self, runner, base_args, temp_dir):
        (temp_dir / "config.json").write_text(json.dumps({"cycle": {"cycles": 2, "interval": 0.01}}))

        result = runner.invoke(cli, base_args + ['cycle'])

        assert result.exit_code == 0, result.output
        assert "2 colors shown" in result.output

    def test_invalid_config_reports_error(self, runner, base_args, temp_dir):
        (temp_dir / "config.json").write_text('{"cycle": {"cycles": 0}}')

        result = runner.invoke(cli, base_args + ['cycle'])

        assert result.exit_code == 1
        assert "ERROR: Invalid configuration value for 'cycle.cycles'" in result.output

    def test_rejects_zero_cycles(self, runner, base_args):
        result = runner.invoke(cli, base_args + ['cycle', '-n', '0'])
        assert result.exit_code == 2


@pytest.mark.integration
class TestColorCommand:
    """Test the color inspection command."""

    def test_hex_input(self, runner, base_args):
        result = runner.invoke(cli, base_args + ['color', '#00abff'])

        assert result.exit_code == 0, result.output
        assert "hex:   #00abff" in result.output
        assert "rgb:   0, 171, 255" in result.output
        assert "label: rgba(0, 0, 0, 0.6)" in result.output

    def test_channel_input(self, runner, base_args):
        result = runner.invoke(cli, base_args + ['color', '100', '100', '100'])

        assert result.exit_code == 0, result.output
        assert "hex:   #646464" in result.output
        assert "label: rgba(255, 255, 255, 0.95)" in result.output

    def test_json_output(self, runner, base_args):
        result = runner.invoke(cli, base_args + ['color', '--json', '0', '0', '0'])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["hex"] == "#000000"

    @pytest.mark.parametrize("value", [['300', '0', '0'], ['#abc'], ['a', 'b', 'c'], ['1', '2']])
    def test_bad_input(self, runner, base_args, value):
        result = runner.invoke(cli, base_args + ['color'] + value)
        assert result.exit_code == 2


@pytest.mark.integration
class TestConfigCommand:
    """Test config management commands."""

    def test_show_defaults(self, runner, base_args):
        result = runner.invoke(cli, base_args + ['config', 'show'])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["cycle"]["cycles"] == 10

    def test_reset_creates_file(self, runner, base_args, temp_dir):
        result = runner.invoke(cli, base_args + ['config', 'reset', '--yes'])

        assert result.exit_code == 0, result.output
        assert (temp_dir / "config.json").exists()

    def test_path(self, runner, base_args, temp_dir):
        result = runner.invoke(cli, base_args + ['config', 'path'])

        assert result.exit_code == 0
        assert "config.json (not created yet)" in result.output


@pytest.mark.integration
class TestLogging:
    """Test where the CLI writes its log file."""

    def test_log_dir_from_config(self, runner, temp_dir):
        config_path = temp_dir / "config.json"
        log_dir = temp_dir / "custom_logs"
        AppConfig(log_dir=log_dir).save(config_path)

        result = runner.invoke(cli, ['--config', str(config_path), '-v', 'config', 'show'])

        assert result.exit_code == 0, result.output
        assert (log_dir / "huecycle.log").exists()
        assert json.loads(result.output)["log_dir"] == str(log_dir)

    def test_log_file_option_wins_over_config(self, runner, temp_dir):
        config_path = temp_dir / "config.json"
        AppConfig(log_dir=temp_dir / "custom_logs").save(config_path)
        log_file = temp_dir / "explicit.log"

        result = runner.invoke(cli, ['--config', str(config_path), '--log-file', str(log_file), 'config', 'path'])

        assert result.exit_code == 0, result.output
        assert log_file.exists()
        assert not (temp_dir / "custom_logs").exists()

    def test_setup_logging_uses_log_dir(self, temp_dir):
        log_path = setup_logging(verbose=0, debug=False, log_file=None, log_level="INFO", log_dir=temp_dir / "logs")
        assert log_path == temp_dir / "logs" / "huecycle.log"
        assert log_path.parent.is_dir()

    def test_interrupt_stops_quietly(self, runner, base_args, temp_dir):
        with patch("huecycle.core.session.CycleSession.run", side_effect=KeyboardInterrupt):
            result = runner.invoke(cli, base_args + ['cycle', '-n', '3'])

        assert result.exit_code == 0, result.output
        assert "Stopped." in result.output
        assert "Failed to run color session" not in (temp_dir / "huecycle.log").read_text()
