"""Apple Reminders, read through osascript (JavaScript for Automation).

Each method is a single osascript call. Attribute reads use the element
array form (`reminders.name()`), which returns the property of every
reminder of the list in one Apple Event instead of one per reminder.
"""

import json
import logging

from reminders_export.errors import AttributeFetchFailure, ListNotFound
from reminders_export.sources.base import DATE_ATTRIBUTES, AttributeName, ListHandle, RecordSource
from reminders_export.utils.dates import parse_timestamp
from reminders_export.utils.osascript import OsascriptError, run_osascript

logger = logging.getLogger(__name__)

# Reminders scripting property for each exported attribute
PROPERTY_NAMES = {
    "title": "name",
    "notes": "body",
    "due_date": "dueDate",
    "creation_date": "creationDate",
    "completion_date": "completionDate",
    "completed": "completed",
    "priority": "priority",
    "flagged": "flagged",
}

LIST_ALL_SCRIPT = """
function run(argv) {
    const lists = Application("Reminders").lists;
    return JSON.stringify({ids: lists.id(), names: lists.name()});
}
"""

FIND_LIST_SCRIPT = """
function run(argv) {
    const matches = Application("Reminders").lists.whose({name: argv[0]})();
    if (matches.length === 0) {
        return JSON.stringify(null);
    }
    return JSON.stringify({id: matches[0].id(), name: matches[0].name()});
}
"""

COUNT_SCRIPT = """
function run(argv) {
    return JSON.stringify(Application("Reminders").lists.byId(argv[0]).reminders.length);
}
"""

ATTRIBUTE_SCRIPT = """
function run(argv) {
    return JSON.stringify(Application("Reminders").lists.byId(argv[0]).reminders[argv[1]]());
}
"""


class RemindersRecordSource(RecordSource):
    """RecordSource backed by the Reminders app on macOS."""

    def __init__(self, timeout: float = 120.0):
        self.timeout = timeout

    async def _run_json(self, script: str, *args: str):
        output = await run_osascript(script, *args, timeout=self.timeout)
        return json.loads(output)

    async def list_all(self) -> list[ListHandle]:
        data = await self._run_json(LIST_ALL_SCRIPT)
        return [ListHandle(name=name, ref=list_id) for list_id, name in zip(data["ids"], data["names"])]

    async def find_list(self, name: str) -> ListHandle:
        data = await self._run_json(FIND_LIST_SCRIPT, name)
        if data is None:
            raise ListNotFound(name)
        return ListHandle(name=data["name"], ref=data["id"])

    async def count(self, handle: ListHandle) -> int:
        return int(await self._run_json(COUNT_SCRIPT, handle.ref))

    async def fetch_attribute(self, handle: ListHandle, attribute: AttributeName) -> list:
        try:
            values = await self._run_json(ATTRIBUTE_SCRIPT, handle.ref, PROPERTY_NAMES[attribute])
        except OsascriptError as e:
            raise AttributeFetchFailure(handle.name, attribute, f"{e.message} ({e.code})") from e
        except json.JSONDecodeError as e:
            raise AttributeFetchFailure(handle.name, attribute, f"unreadable output: {e}") from e

        if not isinstance(values, list):
            raise AttributeFetchFailure(handle.name, attribute, f"expected a list, got {type(values).__name__}")

        if attribute in DATE_ATTRIBUTES:
            return [parse_timestamp(value) for value in values]
        return values
