"""Signal handling utilities for the folder-cleaner CLI.

While files are being deleted, Ctrl+C must not stop the program halfway through a
removal. The handler installed here only records the interruption; the deletion loop
checks it between files and stops cleanly.
"""

import signal
from threading import Event
from types import FrameType
from typing import Optional


class SignalHandler:
    """Records SIGINT while a deletion is in progress.

    Attributes:
        sigint_received: Event that is set when a SIGINT signal is received.
        original_sigint_handler: Handler that was active before installation.
    """

    def __init__(self) -> None:
        self.sigint_received = Event()
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Handle SIGINT signal.

        A second Ctrl+C falls through to the original handler.

        Args:
            signum: The signal number.
            frame: The current stack frame.
        """
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def install(self) -> None:
        """Start recording SIGINT instead of raising KeyboardInterrupt."""
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)
        signal.signal(signal.SIGINT, self.handle_sigint)

    def restore(self) -> None:
        """Put back the handler that was active before :meth:`install`."""
        signal.signal(signal.SIGINT, self.original_sigint_handler)


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Record SIGINT instead of interrupting the program."""
    signal_handler.install()


def restore_signal_handling() -> None:
    """Restore default Ctrl+C behaviour."""
    signal_handler.restore()
