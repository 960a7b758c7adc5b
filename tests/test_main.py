"""Tests for the command line entry point."""

from unittest.mock import patch

import pytest

from weatherterm.data.models import FALLBACK_MESSAGE, City, Unit
from weatherterm.main import build_parser, main

class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test run flags fall back to settings."""
        args = build_parser().parse_args(["run", "--country", "US", "--city", "New York"])

        assert args.unit == "metric"
        assert args.sleep == 300
        assert args.file.endswith(".weatherterm")

    def test_command_required(self):
        """Test a subcommand must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

class TestRun:
    """Tests for the run command."""

    def test_invalid_unit(self, tmp_path):
        """Test an invalid unit writes the fallback message and fails."""
        output = tmp_path / "weather"

        code = main(
            ["run", "--country", "US", "--city", "New York", "--unit", "kelvin", "--file", str(output)]
        )

        assert code == 1
        assert output.read_text(encoding="utf-8") == FALLBACK_MESSAGE

    def test_city_not_found(self, tmp_path):
        """Test an unknown city writes the fallback message and fails."""
        output = tmp_path / "weather"

        code = main(["run", "--country", "US", "--city", "Atlantis", "--file", str(output)])

        assert code == 1
        assert output.read_text(encoding="utf-8") == FALLBACK_MESSAGE

    @patch("weatherterm.main.ReportScheduler")
    @patch("weatherterm.main.OpenWeatherClient")
    def test_starts_scheduler(self, mock_client_class, mock_scheduler_class, tmp_path):
        """Test a valid configuration starts the report loop."""
        output = tmp_path / "weather"

        code = main(
            [
                "run",
                "--country",
                "us",
                "--city",
                "new york",
                "--key",
                "test-key",
                "--unit",
                "imperial",
                "--sleep",
                "60",
                "--file",
                str(output),
            ]
        )

        assert code == 0
        mock_client_class.assert_called_once_with(api_key="test-key")
        kwargs = mock_scheduler_class.call_args.kwargs
        assert kwargs["city"] == City(5128581, "New York", "US")
        assert kwargs["unit"] is Unit.IMPERIAL
        assert kwargs["interval"] == 60
        scheduler = mock_scheduler_class.return_value
        scheduler.install_signal_handlers.assert_called_once()
        scheduler.run.assert_called_once()

    @pytest.mark.parametrize("sleep", ["0", "-5", "soon"])
    def test_rejects_invalid_sleep(self, sleep, capsys):
        """Test the interval must be a positive number of seconds."""
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "--country", "US", "--city", "New York", "--sleep", sleep])

        assert exc_info.value.code != 0
        assert "--sleep" in capsys.readouterr().err

    @patch("weatherterm.main.OpenWeatherClient")
    @patch("weatherterm.main.CityDirectory.load", side_effect=KeyboardInterrupt)
    def test_interrupt_during_startup(self, mock_load, mock_client_class, tmp_path):
        """Test Ctrl-C while loading the city list exits cleanly."""
        code = main(["run", "--country", "US", "--city", "New York", "--file", str(tmp_path / "w")])

        assert code == 0
        mock_client_class.assert_not_called()


class TestInstall:
    """Tests for the install command."""

    @patch("weatherterm.main.install_service")
    def test_install(self, mock_install):
        """Test flags are passed to the installer."""
        code = main(
            ["install", "--country", "CA", "--city", "Toronto", "--key", "k", "--file", ""]
        )

        assert code == 0
        args = mock_install.call_args.args
        assert args[1:] == ("CA", "Toronto", "k", "metric", 300, "")
