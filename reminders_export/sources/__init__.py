from reminders_export.sources.base import ATTRIBUTES, ListHandle, RecordSource


def create_source(settings) -> RecordSource:
    """Create the RecordSource for the configured backend."""
    if settings.backend == "postgres":
        from reminders_export.sources.postgres import PostgresRecordSource
        return PostgresRecordSource(settings.database_url)

    from reminders_export.sources.reminders import RemindersRecordSource
    return RemindersRecordSource(timeout=settings.script_timeout_seconds)


__all__ = ['ATTRIBUTES', 'ListHandle', 'RecordSource', 'create_source']
