"""
Tests for the per-list bulk exporter.

Validates:
- One row per record, in store order, 9 fields each
- Empty lists skip every attribute fetch
- One batched fetch per attribute
- An unavailable attribute blanks only its own column
"""

import pytest

from reminders_export.errors import AttributeFetchFailure
from reminders_export.export.list_exporter import HEADER, OPTIONAL_ATTRIBUTES, ExportRow, export_list
from reminders_export.sources.base import ATTRIBUTES, ListHandle

from conftest import FakeRecordSource


class TestRowAssembly:

    @pytest.mark.asyncio
    async def test_rows_match_records(self, source):
        rows, count = await export_list(source, ListHandle("Work", ref=0))

        assert count == 2
        assert rows == [
            ExportRow(
                "Work", "Send invoice", 'Net 30, see "terms"', "2024-03-05 09:07",
                "2024-03-01 18:30", "", "No", "High", "Yes",
            ),
            ExportRow(
                "Work", "Book travel", "", "", "2024-02-28 08:00",
                "2024-03-02 12:45", "Yes", "None", "No",
            ),
        ]

    @pytest.mark.asyncio
    async def test_every_row_has_header_width(self, source):
        rows, _ = await export_list(source, ListHandle("Work", ref=0))
        assert all(len(row) == len(HEADER) == 9 for row in rows)

    @pytest.mark.asyncio
    async def test_store_order_is_kept(self):
        titles = ["c", "a", "b"]
        source = FakeRecordSource({"Inbox": [{"title": t} for t in titles]})

        rows, count = await export_list(source, ListHandle("Inbox"))

        assert count == 3
        assert [row.title for row in rows] == titles

    @pytest.mark.asyncio
    async def test_missing_attributes_are_empty_not_omitted(self):
        source = FakeRecordSource({"Inbox": [{"title": "Only a title"}]})

        rows, _ = await export_list(source, ListHandle("Inbox"))

        assert rows == [ExportRow("Inbox", "Only a title", "", "", "", "", "No", "None", "No")]


class TestBatching:

    @pytest.mark.asyncio
    async def test_empty_list_skips_attribute_fetches(self, source):
        rows, count = await export_list(source, ListHandle("Home", ref=1))

        assert (rows, count) == ([], 0)
        assert source.calls == [("count", "Home")]

    @pytest.mark.asyncio
    async def test_one_fetch_per_attribute(self, source):
        await export_list(source, ListHandle("Work", ref=0))

        fetched = [attribute for attribute, _ in source.calls if attribute != "count"]
        assert fetched == list(ATTRIBUTES)


class TestFaultIsolation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("attribute", OPTIONAL_ATTRIBUTES)
    async def test_unavailable_attribute_blanks_only_that_column(self, work_records, attribute):
        healthy = FakeRecordSource({"Work": work_records})
        degraded = FakeRecordSource({"Work": work_records}, unavailable={"Work": {attribute}})

        expected, _ = await export_list(healthy, ListHandle("Work"))
        rows, count = await export_list(degraded, ListHandle("Work"))

        assert count == 2
        index = ExportRow._fields.index(attribute)
        for row, good in zip(rows, expected):
            # Boolean and priority columns render their "absent" label
            blank = {"completed": "No", "flagged": "No", "priority": "None"}.get(attribute, "")
            assert row[index] == blank
            assert row[:index] + row[index + 1:] == good[:index] + good[index + 1:]

    @pytest.mark.asyncio
    async def test_failure_in_one_list_leaves_other_lists_alone(self, work_records):
        source = FakeRecordSource(
            {"Work": work_records, "Personal": work_records},
            unavailable={"Work": {"notes"}},
        )

        work_rows, _ = await export_list(source, ListHandle("Work"))
        personal_rows, _ = await export_list(source, ListHandle("Personal"))

        assert [row.notes for row in work_rows] == ["", ""]
        assert [row.notes for row in personal_rows] == ['Net 30, see "terms"', ""]

    @pytest.mark.asyncio
    async def test_unreadable_titles_fail_the_list(self, work_records):
        source = FakeRecordSource({"Work": work_records}, unavailable={"Work": {"title"}})

        with pytest.raises(AttributeFetchFailure):
            await export_list(source, ListHandle("Work"))

    @pytest.mark.asyncio
    async def test_short_column_is_treated_as_absent(self, work_records):
        class ShortNotesSource(FakeRecordSource):
            async def fetch_attribute(self, handle, attribute):
                values = await super().fetch_attribute(handle, attribute)
                return values[:1] if attribute == "notes" else values

        rows, _ = await export_list(ShortNotesSource({"Work": work_records}), ListHandle("Work"))

        assert [row.notes for row in rows] == ["", ""]
