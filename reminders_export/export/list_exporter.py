import logging
from typing import NamedTuple

from reminders_export.errors import AttributeFetchFailure
from reminders_export.export.formatters import bool_label, format_timestamp, priority_label
from reminders_export.sources.base import ListHandle, RecordSource

logger = logging.getLogger(__name__)

# Attributes that may be unavailable for a list without failing the export
OPTIONAL_ATTRIBUTES = (
    "notes",
    "due_date",
    "creation_date",
    "completion_date",
    "completed",
    "priority",
    "flagged",
)


class ExportRow(NamedTuple):
    list_name: str
    title: str
    notes: str
    due_date: str
    creation_date: str
    completion_date: str
    completed: str
    priority: str
    flagged: str


HEADER = (
    "List Name",
    "Title",
    "Notes",
    "Due Date",
    "Creation Date",
    "Completion Date",
    "Completed",
    "Priority",
    "Flagged",
)


def _align(values: list, count: int) -> list:
    """A column shorter than the list means its fetch failed: absent at every position."""
    if len(values) < count:
        return [None] * count
    return values


async def _fetch_optional(source: RecordSource, handle: ListHandle, attribute: str) -> list:
    try:
        return await source.fetch_attribute(handle, attribute)
    except AttributeFetchFailure as e:
        logger.warning(f"Skipping {attribute} for list {handle.name!r}: {e.message}")
        return []


async def export_list(source: RecordSource, handle: ListHandle) -> tuple[list[ExportRow], int]:
    """
    Export every record of one list.

    Issues one batched read per attribute for the whole list. Titles must be
    readable; any other attribute that fails is left empty for every row of
    this list.

    Returns:
        Tuple of (rows in store order, record count)
    """
    count = await source.count(handle)
    if count == 0:
        logger.info(f"List {handle.name!r} is empty, skipping")
        return [], 0

    titles = _align(await source.fetch_attribute(handle, "title"), count)
    columns = {}
    for attribute in OPTIONAL_ATTRIBUTES:
        columns[attribute] = _align(await _fetch_optional(source, handle, attribute), count)

    rows = []
    for i in range(count):
        rows.append(ExportRow(
            list_name=handle.name,
            title=titles[i] or "",
            notes=columns["notes"][i] or "",
            due_date=format_timestamp(columns["due_date"][i]),
            creation_date=format_timestamp(columns["creation_date"][i]),
            completion_date=format_timestamp(columns["completion_date"][i]),
            completed=bool_label(columns["completed"][i]),
            priority=priority_label(columns["priority"][i]),
            flagged=bool_label(columns["flagged"][i]),
        ))

    logger.info(f"Exported {count} reminders from list {handle.name!r}")
    return rows, count
