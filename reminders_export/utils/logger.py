import logging
import sys
from datetime import datetime
from pathlib import Path


class LocalTimeFormatter(logging.Formatter):
    """Formatter that renders timestamps in the local timezone."""

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created).astimezone()
        return dt.strftime(datefmt or "%Y-%m-%d %H:%M:%S %Z")


def default_log_dir() -> Path:
    """~/Library/Logs on macOS, ~/.local/state elsewhere. Never relative to the working directory."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / "reminders-export"
    return Path.home() / ".local" / "state" / "reminders-export" / "logs"


def setup_logger(directory: str | Path | None = None, level: str = 'INFO'):
    """Configure logging to files and, when attached to a terminal, stderr."""
    log_dir = Path(directory).expanduser() if directory else default_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    formatter = LocalTimeFormatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %Z'
    )

    file_handler = logging.FileHandler(log_dir / 'export-output.log', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    error_handler = logging.FileHandler(log_dir / 'export-errors.log', encoding='utf-8')
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    logger.addHandler(error_handler)

    # stdout carries the result string for automation callers, so the console goes to stderr
    if sys.stderr.isatty():
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Silence noisy third-party loggers
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('asyncpg').setLevel(logging.WARNING)

    return logger
