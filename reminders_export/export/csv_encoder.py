"""Minimal-quoting CSV encoding.

Fields are only quoted when they contain a quote, a comma or a line break,
so plain values stay readable in the output.
"""

from collections.abc import Iterable

LINE_TERMINATOR = "\n"


def escape_field(value: str | None) -> str:
    """Escape a single field. None encodes as an empty field."""
    if value is None:
        return ""

    has_quote = '"' in value
    if has_quote:
        value = value.replace('"', '""')
    if has_quote or "," in value or "\n" in value or "\r" in value:
        value = f'"{value}"'
    return value


def build_row(fields: Iterable[str | None]) -> str:
    return ",".join(escape_field(field) for field in fields)


def build_document(rows: Iterable[str], line_terminator: str = LINE_TERMINATOR) -> str:
    """Join encoded rows, header first. No trailing terminator."""
    return line_terminator.join(rows)
