"""Unit tests for the signal handler module in the folder-cleaner CLI."""

import signal
from unittest.mock import patch

import pytest

from folder_cleaner.cli.signal_handler import SignalHandler


@pytest.fixture
def fresh_signal_handler():
    """Create a fresh SignalHandler instance for tests.

    This avoids interference with the singleton instance.
    """
    return SignalHandler()


def test_handle_sigint_sets_event(fresh_signal_handler):
    """Test that SIGINT is recorded and the original handler is put back."""
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, None)

    assert fresh_signal_handler.sigint_received.is_set()
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


def test_install_and_restore(fresh_signal_handler):
    """Test that install swaps in the recording handler and restore undoes it."""
    original = signal.getsignal(signal.SIGINT)
    try:
        fresh_signal_handler.install()
        assert signal.getsignal(signal.SIGINT) == fresh_signal_handler.handle_sigint
        assert fresh_signal_handler.original_sigint_handler == original
    finally:
        fresh_signal_handler.restore()

    assert signal.getsignal(signal.SIGINT) == original


def test_installed_handler_swallows_first_interrupt(fresh_signal_handler):
    """Test that a delivered SIGINT does not raise KeyboardInterrupt once installed."""
    original = signal.getsignal(signal.SIGINT)
    fresh_signal_handler.install()
    try:
        signal.raise_signal(signal.SIGINT)
        assert fresh_signal_handler.sigint_received.is_set()
        assert signal.getsignal(signal.SIGINT) == original
    finally:
        signal.signal(signal.SIGINT, original)
