from datetime import datetime
from dateutil import parser as dateutil_parser


DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def format_timestamp(dt: datetime | None) -> str:
    """
    Format a datetime object to the export display format.

    Args:
        dt: datetime object to format (naive datetimes are taken as local time), or None

    Returns:
        Formatted string in format: YYYY-MM-DD HH:MM (local time), or "" if dt is None
    """
    if dt is None:
        return ""
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime(DISPLAY_FORMAT)


def filename_timestamp(dt: datetime) -> str:
    """
    Format a datetime for use inside a file name.

    Reuses the display format and swaps its separators, so
    "2024-03-05 09:07" becomes "2024-03-05_0907".
    """
    return format_timestamp(dt).replace(" ", "_").replace(":", "")


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """
    Parse any common timestamp format into a datetime.
    Handles ISO 8601 (as emitted by JSON.stringify), RFC 3339 and most other formats.

    Args:
        value: Timestamp string, an already parsed datetime, or None

    Returns:
        datetime (aware if the input carried an offset), or None if absent or unparsable

    Examples:
        >>> parse_timestamp("2024-03-05T09:07:00.000Z")
        datetime.datetime(2024, 3, 5, 9, 7, tzinfo=tzutc())
    """
    if value is None or isinstance(value, datetime):
        return value

    try:
        return dateutil_parser.parse(value)
    except (ValueError, OverflowError):
        return None
