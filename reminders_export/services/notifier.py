import logging
import sys

from reminders_export.utils.osascript import OsascriptError, run_osascript

logger = logging.getLogger(__name__)

DIALOG_SCRIPT = """
on run argv
    display dialog (item 2 of argv) with title (item 1 of argv) buttons {"OK"} default button "OK"
end run
"""


class ConsoleNotifier:
    """Prints messages to stderr. Used where no dialog is available."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    async def show_message(self, title: str, body: str):
        print(f"{title}\n{body}", file=self.stream)


class DialogNotifier:
    """Blocking macOS dialog shown through osascript."""

    def __init__(self, timeout: float = 600.0):
        self.timeout = timeout

    async def show_message(self, title: str, body: str):
        try:
            await run_osascript(DIALOG_SCRIPT, title, body, language="AppleScript", timeout=self.timeout)
        except OsascriptError as e:
            logger.error(f"Error showing dialog {title!r}: {e.message}")
        except OSError as e:
            logger.error(f"Could not launch osascript for dialog {title!r}: {e}")


def create_notifier(backend: str):
    """Create the notifier for the configured backend ("dialog" or "console")."""
    if backend == "dialog":
        return DialogNotifier()
    return ConsoleNotifier()
