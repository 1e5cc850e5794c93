import logging
import os
import subprocess
import sys
from pathlib import Path

from reminders_export.errors import WriteFailure

logger = logging.getLogger(__name__)


def default_output_dir() -> Path:
    """The user's desktop, or their home directory when there is none."""
    desktop = Path.home() / "Desktop"
    return desktop if desktop.is_dir() else Path.home()


def open_in_file_browser(folder: Path):
    """Open a folder in Finder / the desktop file manager / Explorer."""
    if sys.platform == "darwin":
        subprocess.Popen(["open", str(folder)])
    elif sys.platform == "win32":
        os.startfile(folder)
    else:
        subprocess.Popen(["xdg-open", str(folder)], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


class DesktopFileSink:
    """Writes export documents into a single output directory."""

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory).expanduser() if directory else default_output_dir()

    def write(self, content: str, filename: str) -> Path:
        """
        Write the whole document as UTF-8.

        Returns:
            Absolute path of the written file

        Raises:
            WriteFailure: the directory or file could not be written
        """
        path = (self.directory / filename).resolve()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8", newline="")
        except OSError as e:
            raise WriteFailure(f"Could not write {path}: {e.strerror or e}", code=e.errno) from e
        logger.info(f"Wrote {len(content)} characters to {path}")
        return path

    def reveal(self, path: Path):
        try:
            open_in_file_browser(path.parent)
        except OSError as e:
            logger.warning(f"Could not open {path.parent}: {e}")
