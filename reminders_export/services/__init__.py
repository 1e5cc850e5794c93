from reminders_export.services.file_sink import DesktopFileSink
from reminders_export.services.notifier import ConsoleNotifier, DialogNotifier, create_notifier

__all__ = ['DesktopFileSink', 'ConsoleNotifier', 'DialogNotifier', 'create_notifier']
