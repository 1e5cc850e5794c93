from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Literal

AttributeName = Literal[
    "title",
    "notes",
    "due_date",
    "creation_date",
    "completion_date",
    "completed",
    "priority",
    "flagged",
]

ATTRIBUTES: tuple[AttributeName, ...] = (
    "title",
    "notes",
    "due_date",
    "creation_date",
    "completion_date",
    "completed",
    "priority",
    "flagged",
)

DATE_ATTRIBUTES = frozenset({"due_date", "creation_date", "completion_date"})


@dataclass(frozen=True)
class ListHandle:
    """A list in the store. `ref` is whatever the source needs to address it."""
    name: str
    ref: Any = None


class RecordSource(ABC):
    """
    Read-only access to a task-list store.

    Every attribute read is batched: one call returns that attribute for every
    record of the list, in the store's record order. Date attributes are
    returned as datetime objects (or None).
    """

    @abstractmethod
    async def list_all(self) -> list[ListHandle]:
        """All lists, in the store's enumeration order."""

    @abstractmethod
    async def find_list(self, name: str) -> ListHandle:
        """Look up a list by exact name. Raises ListNotFound."""

    @abstractmethod
    async def count(self, handle: ListHandle) -> int:
        """Number of records in the list."""

    @abstractmethod
    async def fetch_attribute(self, handle: ListHandle, attribute: AttributeName) -> list:
        """One attribute for every record of the list. Raises AttributeFetchFailure."""

    async def close(self) -> None:
        """Release any connection held by the source."""
