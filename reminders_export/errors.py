class ExportError(Exception):
    """Base class for every failure the export can report."""

    code = "export_error"

    def __init__(self, message: str, code: str | int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ListNotFound(ExportError):
    """The requested list does not exist in the store."""

    code = "list_not_found"

    def __init__(self, list_name: str):
        super().__init__(f'List "{list_name}" not found')
        self.list_name = list_name


class NothingToExport(ExportError):
    """Every resolved list was empty."""

    code = "nothing_to_export"

    def __init__(self, target: str):
        super().__init__(f"No reminders found in {target}")
        self.target = target


class AttributeFetchFailure(ExportError):
    """A batched attribute read failed for a whole list."""

    code = "attribute_fetch_failure"

    def __init__(self, list_name: str, attribute: str, reason: str = ""):
        message = f"Could not read {attribute} for list {list_name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.list_name = list_name
        self.attribute = attribute


class WriteFailure(ExportError):
    """The output document could not be written."""

    code = "write_failure"


class UnexpectedFailure(ExportError):
    """Any other error raised while talking to the store."""

    code = "unexpected_failure"
