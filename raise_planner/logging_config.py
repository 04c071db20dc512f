"""
Structured logging configuration for the raise planner.

Library modules only create loggers with `logging.getLogger(__name__)`;
applications call `setup_logging` once to route records into separate log
files for different concerns.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Set

# Logger enabled at DEBUG when debug logging is requested
DEBUG_LOGGER = "raise_planner.debug"

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILES = (
    "planning_events.log",
    "warnings_errors.log",
    "debug_detail.log",
    "combined.log",
)

# Track if logging is already configured and log files
_LOGGING_CONFIGURED = False
_log_files_created: Set[Path] = set()
_managed_handlers = []
_previous_levels = {}


def clear_logs(log_dir: Path) -> None:
    """
    Clear all log files in the specified directory.

    Args:
        log_dir: Directory containing log files to clear
    """
    for name in LOG_FILES:
        log_file = Path(log_dir) / name
        if log_file.exists():
            try:
                log_file.unlink()
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not delete {log_file}: {e}")


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8',
        mode='a'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    _log_files_created.add(path)
    _managed_handlers.append(handler)
    return handler


def setup_logging(log_dir: Path, debug: bool = False, clear_existing: bool = True) -> None:
    """
    Configure structured logging for the application.

    Creates separate log files for different concerns:
    - planning_events.log: Team and scenario planning events under the
      `raise_planner` package (INFO+)
    - warnings_errors.log: Warnings and errors (WARNING+)
    - debug_detail.log: Detailed debug information (DEBUG, only if debug=True)
    - combined.log: Combined log of all messages (INFO+)

    Args:
        log_dir: Directory where log files will be stored
        debug: If True, enables debug logging and creates debug_detail.log
        clear_existing: If True, clears existing log files before starting
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    if clear_existing:
        clear_logs(log_dir)

    root_logger = logging.getLogger()
    for name in (None, "raise_planner", DEBUG_LOGGER):
        _previous_levels[name] = logging.getLogger(name).level
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    file_formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    console_formatter = logging.Formatter("%(levelname)-8s %(message)s")

    # Console handler (for warnings and above)
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(console_formatter)
    _managed_handlers.append(console)
    root_logger.addHandler(console)

    root_logger.addHandler(_rotating_handler(log_dir / "combined.log", logging.INFO, file_formatter))
    root_logger.addHandler(
        _rotating_handler(log_dir / "warnings_errors.log", logging.WARNING, file_formatter)
    )

    # planning_events.log collects everything the package itself emits
    package_logger = logging.getLogger("raise_planner")
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    package_logger.addHandler(
        _rotating_handler(log_dir / "planning_events.log", logging.INFO, file_formatter)
    )

    if debug:
        debug_logger = logging.getLogger(DEBUG_LOGGER)
        debug_logger.setLevel(logging.DEBUG)
        root_logger.addHandler(
            _rotating_handler(log_dir / "debug_detail.log", logging.DEBUG, file_formatter)
        )

    _LOGGING_CONFIGURED = True


def reset_logging() -> None:
    """Detach and close every handler installed by setup_logging and restore levels."""
    global _LOGGING_CONFIGURED
    for handler in _managed_handlers:
        for name in (None, "raise_planner"):
            logging.getLogger(name).removeHandler(handler)
        handler.close()
    _managed_handlers.clear()
    for name, level in _previous_levels.items():
        logging.getLogger(name).setLevel(level)
    _previous_levels.clear()
    _log_files_created.clear()
    _LOGGING_CONFIGURED = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a properly configured logger instance.

    Args:
        name: Logger name (e.g., __name__). If None, returns root logger.

    Returns:
        Configured logger instance
    """
    if not _LOGGING_CONFIGURED:
        setup_logging(Path("output_dev/raise_logs"), debug=False)
    return logging.getLogger(name)
