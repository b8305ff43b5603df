"""Unit tests for the logging system."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from radalt.core.logging_system import (
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default logging after each test."""
    yield
    shutdown_logging()
    initialize_logging(use_platform_dir=False)


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        """Test macOS log directory path."""
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "RadAlt"

    def test_linux_log_dir(self) -> None:
        """Test Linux log directory path."""
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".radalt" / "logs"

    def test_windows_log_dir(self) -> None:
        """Test Windows log directory path."""
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert "RadAlt" in str(log_dir)
                assert log_dir.name == "Logs"


class TestLogRotation:
    """Tests for log rotation."""

    def test_rotate_logs_no_existing_log(self, tmp_path: Path) -> None:
        """Rotation without a current log does nothing."""
        rotate_logs(tmp_path, "test.log", 5)
        assert list(tmp_path.glob("*")) == []

    def test_rotate_logs_shifts_files(self, tmp_path: Path) -> None:
        """Current log becomes .1 and older logs move up."""
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("previous")

        rotate_logs(tmp_path, "test.log", 5)

        assert not (tmp_path / "test.log").exists()
        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "previous"

    def test_rotate_logs_drops_oldest(self, tmp_path: Path) -> None:
        """Logs beyond keep_count are deleted."""
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("one")
        (tmp_path / "test.log.2").write_text("two")

        rotate_logs(tmp_path, "test.log", 2)

        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "one"
        assert not (tmp_path / "test.log.3").exists()


class TestInitializeLogging:
    """Tests for initialize_logging and get_logger."""

    def test_missing_config_raises(self, tmp_path: Path) -> None:
        """A missing config file is reported as LoggingError."""
        with pytest.raises(LoggingError):
            initialize_logging(tmp_path / "missing.yaml", use_platform_dir=False)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Unparseable YAML is reported as LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text("level: [unclosed")

        with pytest.raises(LoggingError):
            initialize_logging(config, use_platform_dir=False)

    @pytest.mark.parametrize(
        "contents",
        [
            "level: LOUD\n",
            "console:\n  level: BASIC_FORMAT\n",
            "components:\n  radalt.test.component:\n    level: chatty\n",
        ],
    )
    def test_unknown_level_raises(self, tmp_path: Path, contents: str) -> None:
        """Unknown level names are reported as LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text(contents)

        with pytest.raises(LoggingError, match="Invalid log level"):
            initialize_logging(config, use_platform_dir=False)

    def test_lowercase_level_accepted(self, tmp_path: Path) -> None:
        config = tmp_path / "logging.yaml"
        config.write_text(
            "console:\n"
            "  enabled: false\n"
            "components:\n"
            "  radalt.test.lower:\n"
            "    level: debug\n"
        )

        initialize_logging(config, use_platform_dir=False)

        assert get_logger("radalt.test.lower").level == logging.DEBUG

    def test_component_level_from_config(self, tmp_path: Path) -> None:
        """Component sections set the level of their logger."""
        config = tmp_path / "logging.yaml"
        config.write_text(
            "console:\n"
            "  enabled: false\n"
            "components:\n"
            "  radalt.test.component:\n"
            "    level: DEBUG\n"
            "  radalt.test.silenced:\n"
            "    enabled: false\n"
        )

        initialize_logging(config, use_platform_dir=False)

        assert get_logger("radalt.test.component").level == logging.DEBUG
        assert get_logger("radalt.test.silenced").disabled is True

    def test_file_log_written_to_log_dir(self, tmp_path: Path) -> None:
        """Enabled file logging writes into log_dir."""
        config = tmp_path / "logging.yaml"
        config.write_text(
            f"log_dir: {tmp_path.as_posix()}/logs\n"
            "console:\n"
            "  enabled: false\n"
            "file_log:\n"
            "  enabled: true\n"
            "  filename: radalt.log\n"
        )

        initialize_logging(config, use_platform_dir=False)
        get_logger("radalt.test.file").warning("written to file")
        shutdown_logging()

        log_file = tmp_path / "logs" / "radalt.log"
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_get_logger_is_cached(self) -> None:
        """The same logger instance is returned for the same name."""
        assert get_logger("radalt.test.cached") is get_logger("radalt.test.cached")
