"""Logging system for simulation elements and plugins.

Loggers are configured from a YAML file (or built-in defaults) and can be
tuned per component, so a noisy channel can be raised to DEBUG while the
rest of the simulation stays at INFO.

Platform-specific log locations:
    - macOS: ~/Library/Logs/RadAlt/radalt.log
    - Linux: ~/.radalt/logs/radalt.log
    - Windows: %AppData%/RadAlt/Logs/radalt.log

Typical usage example:
    from radalt.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Radio altimeter %d constructed", number)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_installed_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory.
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "RadAlt"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "RadAlt" / "Logs"
    else:
        return Path.home() / ".radalt" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "radalt.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None, use_platform_dir: bool = True
) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup, before the simulation is built.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, log to the platform-specific directory.
            If False, use ``log_dir`` from the config (development/testing).

    Raises:
        LoggingError: If the configuration cannot be loaded or names an
            unknown log level.
    """
    global _logging_config, _initialized

    config = _get_default_config()
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        config.update(loaded)

    if use_platform_dir:
        config["log_dir"] = str(get_platform_log_dir())

    _validate_levels(config)
    _logging_config = config

    _loggers_cache.clear()
    _configure_root_logger()
    for name in _logging_config.get("components", {}):
        _apply_component_config(logging.getLogger(name))
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "file_log": {
            "enabled": False,
            "filename": "radalt.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "components": {},
    }


def _resolve_level(name: Any) -> int:
    level = getattr(logging, str(name).upper(), None)
    if not isinstance(level, int):
        raise LoggingError(f"Invalid log level: {name!r}")
    return level


def _validate_levels(config: dict[str, Any]) -> None:
    _resolve_level(config.get("level", "INFO"))
    _resolve_level(config.get("console", {}).get("level", "INFO"))
    for component_config in config.get("components", {}).values():
        if "level" in component_config:
            _resolve_level(component_config["level"])


def _configure_root_logger() -> None:
    """Configure the root logger with console and file handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(_logging_config.get("level", "INFO")))
    _remove_installed_handlers()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_resolve_level(console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        _install_handler(console_handler)

    file_config = _logging_config.get("file_log", {})
    if file_config.get("enabled", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_filename = file_config.get("filename", "radalt.log")
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            rotate_logs(log_dir, log_filename, file_config.get("backup_count", 5))
            file_handler = logging.FileHandler(log_dir / log_filename, mode="w", encoding="utf-8")
        except OSError as e:
            raise LoggingError(f"Failed to open log file in {log_dir}: {e}") from e

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        _install_handler(file_handler)


def _install_handler(handler: logging.Handler) -> None:
    logging.getLogger().addHandler(handler)
    _installed_handlers.append(handler)


def _remove_installed_handlers() -> None:
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a simulation component.

    Loggers are cached. A component can be given its own level, or be
    silenced, under the ``components`` section of the logging config:

        components:
          radalt.systems.radio_altimeter.ala52b:
            level: DEBUG

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.
    """
    if not _initialized:
        initialize_logging(use_platform_dir=False)

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _apply_component_config(logger)

    _loggers_cache[name] = logger
    return logger


def _apply_component_config(logger: logging.Logger) -> None:
    component_config = _logging_config.get("components", {}).get(logger.name, {})

    if component_config.get("enabled", True):
        if "level" in component_config:
            logger.setLevel(_resolve_level(component_config["level"]))
    else:
        logger.disabled = True


def shutdown_logging() -> None:
    """Flush and close the handlers installed here and forget cached loggers."""
    global _initialized

    _remove_installed_handlers()
    _loggers_cache.clear()
    _initialized = False
