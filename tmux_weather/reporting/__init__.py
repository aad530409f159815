from .error_reporter import ErrorReporter, format_trace, shorten_home
from .notifier import DesktopNotifier

__all__ = [
    "DesktopNotifier",
    "ErrorReporter",
    "format_trace",
    "shorten_home",
]
