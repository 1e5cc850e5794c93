from .logger import setup_logger
from .dates import format_timestamp, filename_timestamp, parse_timestamp
from .osascript import OsascriptError, run_osascript

__all__ = [
    'setup_logger',
    'format_timestamp',
    'filename_timestamp',
    'parse_timestamp',
    'OsascriptError',
    'run_osascript',
]
