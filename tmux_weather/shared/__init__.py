from .logging_mixin import LIBRARY_NAME, LoggingMixin, configure_logging

__all__ = [
    "LIBRARY_NAME",
    "LoggingMixin",
    "configure_logging",
]
