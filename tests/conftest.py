from datetime import datetime
from pathlib import Path

import pytest

from reminders_export.errors import AttributeFetchFailure, ListNotFound, WriteFailure
from reminders_export.sources.base import ListHandle, RecordSource


class FakeRecordSource(RecordSource):
    """In-memory store. `lists` maps list name -> list of record dicts."""

    def __init__(self, lists: dict[str, list[dict]], unavailable: dict[str, set[str]] | None = None):
        self.lists = lists
        self.unavailable = unavailable or {}
        self.calls = []
        self.closed = False

    async def list_all(self):
        return [ListHandle(name=name, ref=i) for i, name in enumerate(self.lists)]

    async def find_list(self, name):
        if name not in self.lists:
            raise ListNotFound(name)
        return ListHandle(name=name, ref=list(self.lists).index(name))

    async def count(self, handle):
        self.calls.append(("count", handle.name))
        return len(self.lists[handle.name])

    async def fetch_attribute(self, handle, attribute):
        self.calls.append((attribute, handle.name))
        if attribute in self.unavailable.get(handle.name, set()):
            raise AttributeFetchFailure(handle.name, attribute, "property not available")
        return [record.get(attribute) for record in self.lists[handle.name]]

    async def close(self):
        self.closed = True


class MemorySink:
    """FileSink that keeps written documents in memory."""

    def __init__(self, directory: str = "/exports", fail_with: str | None = None):
        self.directory = Path(directory)
        self.fail_with = fail_with
        self.written = {}
        self.revealed = []

    def write(self, content, filename):
        if self.fail_with:
            raise WriteFailure(self.fail_with, code=13)
        path = self.directory / filename
        self.written[path] = content
        return path

    def reveal(self, path):
        self.revealed.append(path)


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    async def show_message(self, title, body):
        self.messages.append((title, body))


@pytest.fixture
def work_records():
    """Two reminders with every attribute populated."""
    return [
        {
            "title": "Send invoice",
            "notes": "Net 30, see \"terms\"",
            "due_date": datetime(2024, 3, 5, 9, 7),
            "creation_date": datetime(2024, 3, 1, 18, 30),
            "completion_date": None,
            "completed": False,
            "priority": 1,
            "flagged": True,
        },
        {
            "title": "Book travel",
            "notes": None,
            "due_date": None,
            "creation_date": datetime(2024, 2, 28, 8, 0),
            "completion_date": datetime(2024, 3, 2, 12, 45),
            "completed": True,
            "priority": 0,
            "flagged": False,
        },
    ]


@pytest.fixture
def source(work_records):
    return FakeRecordSource({"Work": work_records, "Home": []})


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def notifier():
    return RecordingNotifier()
