"""Unit tests for the signal handler module in the dirtree CLI."""

import signal
from unittest.mock import MagicMock, patch

import pytest

from dirtree.cli import signal_handler as signal_module
from dirtree.cli.signal_handler import SignalHandler, cleanup, setup_signal_handling

requires_sigpipe = pytest.mark.skipif(not hasattr(signal, "SIGPIPE"), reason="SIGPIPE not available")


@pytest.fixture
def fresh_signal_handler():
    """A handler instance independent of the module singleton."""
    return SignalHandler()


def test_initial_state(fresh_signal_handler):
    assert not fresh_signal_handler.sigpipe_received.is_set()
    assert not fresh_signal_handler.sigint_received.is_set()
    assert not fresh_signal_handler.interrupted
    assert fresh_signal_handler.original_sigint_handler is not None


@requires_sigpipe
def test_handle_sigpipe(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigpipe(signal.SIGPIPE, MagicMock())

    assert fresh_signal_handler.sigpipe_received.is_set()
    assert fresh_signal_handler.interrupted
    mock_signal.assert_called_once_with(signal.SIGPIPE, fresh_signal_handler.original_sigpipe_handler)


def test_handle_sigint(fresh_signal_handler):
    with patch("signal.signal") as mock_signal:
        fresh_signal_handler.handle_sigint(signal.SIGINT, MagicMock())

    assert fresh_signal_handler.sigint_received.is_set()
    assert fresh_signal_handler.interrupted
    mock_signal.assert_called_once_with(signal.SIGINT, fresh_signal_handler.original_sigint_handler)


def test_setup_signal_handling():
    with patch("signal.signal") as mock_signal:
        setup_signal_handling()

    mock_signal.assert_any_call(signal.SIGINT, signal_module.signal_handler.handle_sigint)
    if hasattr(signal, "SIGPIPE"):
        mock_signal.assert_any_call(signal.SIGPIPE, signal_module.signal_handler.handle_sigpipe)


def test_cleanup_without_signal():
    with patch.object(signal_module, "signal_handler", SignalHandler()), patch.object(signal_module.os, "dup2") as dup2:
        cleanup()
    dup2.assert_not_called()


def test_cleanup_after_signal():
    handler = SignalHandler()
    handler.sigint_received.set()
    with (
        patch.object(signal_module, "signal_handler", handler),
        patch.object(signal_module.os, "open", return_value=123),
        patch.object(signal_module.os, "dup2") as dup2,
        patch.object(signal_module.sys, "stdout") as stdout,
    ):
        stdout.fileno.return_value = 1
        cleanup()
    dup2.assert_called_once_with(123, 1)
