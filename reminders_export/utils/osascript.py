import asyncio
import logging
import re

from reminders_export.errors import ExportError

logger = logging.getLogger(__name__)

# osascript ends execution errors with the AppleScript error number, e.g. "... (-1728)"
_ERROR_NUMBER = re.compile(r"\((-?\d+)\)\s*$")


class OsascriptError(ExportError):
    """osascript exited non-zero. `code` holds the AppleScript error number when present."""

    code = "osascript_error"


def parse_osascript_error(stderr: str, returncode: int) -> OsascriptError:
    """Build an OsascriptError from osascript's stderr."""
    text = stderr.strip()
    match = _ERROR_NUMBER.search(text)
    if match:
        message = text[:match.start()].strip()
        # Drop the "0:123: execution error: " location prefix
        if "execution error:" in message:
            message = message.split("execution error:", 1)[1].strip()
        return OsascriptError(message or text, code=int(match.group(1)))
    return OsascriptError(text or f"osascript exited with status {returncode}", code=returncode)


async def run_osascript(script: str, *args: str, language: str = "JavaScript", timeout: float = 120.0) -> str:
    """
    Run a script through osascript and return its stdout.

    Args:
        script: Script source, passed with -e
        *args: Values handed to the script's run handler as argv
        language: "JavaScript" or "AppleScript"
        timeout: Seconds to wait before killing osascript

    Raises:
        OsascriptError: osascript exited non-zero or timed out
    """
    process = await asyncio.create_subprocess_exec(
        "osascript", "-l", language, "-e", script, *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise OsascriptError(f"osascript timed out after {timeout:g}s", code="timeout")

    if process.returncode != 0:
        error = parse_osascript_error(stderr.decode("utf-8", errors="replace"), process.returncode)
        logger.debug(f"osascript failed ({error.code}): {error.message}")
        raise error

    return stdout.decode("utf-8").strip()
