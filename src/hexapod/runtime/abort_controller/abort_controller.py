"""
This module provides the AbortController class for handling shutdown signals.
"""

import signal
import threading

from hexapod import labels
from hexapod.logger import Logger

log = Logger().setup_logger('Abort controller')


class AbortController:
    """Turns SIGINT and SIGTERM into a halt request.

    The handler only sets the halt flag; the control loop sees it at the
    start of its next tick and sits the robot down before stopping.
    """

    def __init__(self, halt: threading.Event):
        self._halt = halt
        self._previous_handlers = {}

    def install(self) -> None:
        for signum in (signal.SIGINT, signal.SIGTERM):
            self._previous_handlers[signum] = signal.signal(signum, self.exit_gracefully)

    def uninstall(self) -> None:
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler)
        self._previous_handlers.clear()

    def exit_gracefully(self, signum, _frame):
        log.info(labels.ABORT_SIGNAL.format(signal.Signals(signum).name))
        self._halt.set()
