import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from reminders_export.errors import ExportError, ListNotFound, NothingToExport, UnexpectedFailure
from reminders_export.export.csv_encoder import build_document, build_row
from reminders_export.export.list_exporter import HEADER, ExportRow, export_list
from reminders_export.sources.base import ListHandle, RecordSource
from reminders_export.utils.dates import filename_timestamp

logger = logging.getLogger(__name__)

ALL_LISTS = "All Lists"
NOTHING_FOUND_RESULT = "No reminders found"
LIST_NOT_FOUND_RESULT = "Error: List not found"


@dataclass(frozen=True)
class ExportOutcome:
    """What a run hands back: the automation result string and the dialog to show."""
    result: str
    title: str
    body: str
    path: Path | None = None
    count: int = 0

    @property
    def succeeded(self) -> bool:
        return self.path is not None

    @property
    def is_error(self) -> bool:
        return self.result.startswith("Error: ")


def resolve_target(selector: str | None) -> tuple[str, bool]:
    """
    Returns:
        Tuple of (target list name, interactive). No selector means an
        interactive export of every list.
    """
    if selector is None or not selector.strip():
        return ALL_LISTS, True
    return selector, False


def sanitize_list_name(name: str) -> str:
    """Make a list name safe to embed in a file name."""
    return name.replace("/", "_").replace(":", "_")


def build_filename(target: str, now: datetime) -> str:
    stamp = filename_timestamp(now)
    if target == ALL_LISTS:
        return f"Reminders_Export_{stamp}.csv"
    return f"Reminders_{sanitize_list_name(target)}_{stamp}.csv"


def _outcome_for_error(error: ExportError, target: str) -> ExportOutcome:
    if isinstance(error, ListNotFound):
        return ExportOutcome(
            result=LIST_NOT_FOUND_RESULT,
            title="List Not Found",
            body=f'Could not find a list named "{error.list_name}".',
        )
    if isinstance(error, NothingToExport):
        return ExportOutcome(
            result=NOTHING_FOUND_RESULT,
            title="No Reminders",
            body=f"No reminders found in {target}.",
        )
    return ExportOutcome(
        result=f"Error: {error.message}",
        title="Export Failed",
        body=f"Error {error.code}: {error.message}",
    )


class ExportOrchestrator:
    """Runs one export: resolve lists, export each, write the file, report."""

    def __init__(
        self,
        source: RecordSource,
        sink,
        notifier,
        reveal_folder: bool = True,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.source = source
        self.sink = sink
        self.notifier = notifier
        self.reveal_folder = reveal_folder
        self.clock = clock

    async def run(self, selector: str | None = None) -> ExportOutcome:
        """
        Export the selected list (or all lists) and report the outcome.

        Every failure is turned into an outcome here, so callers only ever
        receive an ExportOutcome. The dialog is only shown for interactive runs.
        """
        target, interactive = resolve_target(selector)
        logger.info(f"Starting export of {target} ({'interactive' if interactive else 'automated'})")

        try:
            outcome = await self._export(target)
        except (ListNotFound, NothingToExport) as e:
            logger.info(e.message)
            outcome = _outcome_for_error(e, target)
        except ExportError as e:
            logger.error(f"Export of {target} failed ({e.code}): {e.message}")
            outcome = _outcome_for_error(e, target)
        except Exception as e:
            logger.exception(f"Unexpected error exporting {target}")
            outcome = _outcome_for_error(UnexpectedFailure(str(e) or repr(e), code=type(e).__name__), target)

        if interactive:
            try:
                await self.notifier.show_message(outcome.title, outcome.body)
            except Exception as e:
                logger.error(f"Error showing {outcome.title!r} notification: {e}")

        if outcome.succeeded and self.reveal_folder:
            self.sink.reveal(outcome.path)

        return outcome

    async def _resolve_lists(self, target: str) -> list[ListHandle]:
        if target == ALL_LISTS:
            return await self.source.list_all()
        return [await self.source.find_list(target)]

    async def _export(self, target: str) -> ExportOutcome:
        handles = await self._resolve_lists(target)

        rows: list[ExportRow] = []
        total = 0
        for handle in handles:
            list_rows, count = await export_list(self.source, handle)
            rows.extend(list_rows)
            total += count

        if total == 0:
            raise NothingToExport(target)

        document = build_document([build_row(HEADER)] + [build_row(row) for row in rows])
        path = self.sink.write(document, build_filename(target, self.clock()))

        logger.info(f"Exported {total} reminders from {target} to {path}")
        noun = "reminder" if total == 1 else "reminders"
        return ExportOutcome(
            result=str(path),
            title="Export Complete",
            body=f"Exported {total} {noun} from {target}.\n\nSaved to:\n{path}",
            path=path,
            count=total,
        )
