from reminders_export.utils.dates import format_timestamp

__all__ = ['format_timestamp', 'priority_label', 'bool_label']


def priority_label(priority: int | None) -> str:
    """
    Map the Reminders priority number to a label.

    Reminders stores 0 for no priority, 1-4 for high, 5 for medium and 6-9 for low.
    """
    if not priority or priority < 0:
        return "None"
    if priority < 5:
        return "High"
    if priority == 5:
        return "Medium"
    return "Low"


def bool_label(value: bool | int | None) -> str:
    # Integer flag columns (smallint 0/1) count as booleans
    return "Yes" if value is True or value == 1 else "No"
