from reminders_export.export.csv_encoder import build_document, build_row, escape_field
from reminders_export.export.formatters import bool_label, format_timestamp, priority_label
from reminders_export.export.list_exporter import HEADER, ExportRow, export_list
from reminders_export.export.orchestrator import ALL_LISTS, ExportOrchestrator, ExportOutcome, build_filename

__all__ = [
    'build_document',
    'build_row',
    'escape_field',
    'bool_label',
    'format_timestamp',
    'priority_label',
    'HEADER',
    'ExportRow',
    'export_list',
    'ALL_LISTS',
    'ExportOrchestrator',
    'ExportOutcome',
    'build_filename',
]
