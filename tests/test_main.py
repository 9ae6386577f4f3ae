"""
Tests for the command-line interface.
"""

from pathlib import Path
from unittest.mock import Mock, patch

import yaml
from typer.testing import CliRunner

from hearth.main import cli


class TestMainCLI:
    """Test cases for CLI commands."""

    def setup_method(self) -> None:
        self.runner = CliRunner()

    def test_help(self) -> None:
        result = self.runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Minimal application bootstrap" in result.output

    def test_init_config(self, tmp_path: Path) -> None:
        output = tmp_path / "config.yaml"

        result = self.runner.invoke(cli, ["init-config", "--output", str(output)])

        assert result.exit_code == 0
        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["environment"] == "production"
        assert data["errors"]["install_handler"] is True

    def test_init_config_bad_format(self, tmp_path: Path) -> None:
        result = self.runner.invoke(
            cli, ["init-config", "--output", str(tmp_path / "c.ini"), "--format", "ini"])

        assert result.exit_code == 1

    def test_validate_config(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("environment: staging\nlogging:\n  level: DEBUG\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["validate-config", str(path)])

        assert result.exit_code == 0
        assert "is valid" in result.output
        assert "staging" in result.output

    def test_validate_config_invalid_level(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: LOUD\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["validate-config", str(path)])

        assert result.exit_code == 1

    def test_validate_config_numeric_level(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: 10\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["validate-config", str(path)])

        assert result.exit_code == 1
        assert "logging.level" in result.output

    def test_validate_config_missing_file(self, tmp_path: Path) -> None:
        result = self.runner.invoke(cli, ["validate-config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1

    @patch("hearth.infrastructure.logging.setup.setup_logging")
    def test_info(self, mock_setup_logging: Mock, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("errors:\n  install_handler: false\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["info", "--config", str(path), "--env", "testing"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once()
        assert "Environment: testing" in result.output
        assert "ErrorServiceProvider" in result.output
        assert "StandardServiceProvider" in result.output
        assert "router -> IRouter" in result.output

    @patch("hearth.infrastructure.logging.setup.setup_logging")
    def test_info_uses_logging_section(self, mock_setup_logging: Mock, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "errors:\n  install_handler: false\nlogging:\n  level: WARNING\n", encoding="utf-8")

        result = self.runner.invoke(cli, ["info", "--config", str(path)])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once()
        assert mock_setup_logging.call_args.args[0].level == "WARNING"
