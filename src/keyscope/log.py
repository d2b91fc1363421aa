# src/keyscope/log.py
"""
Logging helpers for keyscope.

:class:`LoggingErrorReporter` is the default :class:`ErrorReporter` used by
the pattern compiler.  Messages flagged for the user are logged at ERROR and
forwarded to an optional ``notify`` callback (an editor toast, a CLI
``print``); everything else goes to DEBUG.
"""
import logging
from collections import deque
from typing import Callable, Deque, Optional

__all__ = [
    "LoggingErrorReporter",
    "configure_logging",
    "default_reporter",
]

logger = logging.getLogger("keyscope")

# Most recent user-facing messages kept on a reporter
MAX_NOTIFICATIONS = 100


class LoggingErrorReporter:
    """Route diagnostics through :mod:`logging`.

    ``notifications`` holds the last *max_notifications* messages shown to the
    user; older ones are discarded.
    """

    def __init__(
        self,
        notify: Optional[Callable[[str], None]] = None,
        log: Optional[logging.Logger] = None,
        max_notifications: int = MAX_NOTIFICATIONS,
    ) -> None:
        self._notify = notify
        self._logger = log or logger
        self.notifications: Deque[str] = deque(maxlen=max_notifications)

    def report_error(self, message: str, notify_user: bool = False) -> None:
        if not notify_user:
            self._logger.debug("%s", message)
            return
        self._logger.error("%s", message)
        self.notifications.append(str(message))
        if self._notify is not None:
            self._notify(str(message))


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root handler from ``[logging] log_level``."""
    if level is None:
        from .config import config
        level = config.get('logging', 'log_level', 'INFO')
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Shared reporter used when callers do not inject one
default_reporter = LoggingErrorReporter()
