"""SIGPIPE and SIGINT bookkeeping for the dirtree command.

A downstream reader closing the pipe (`dirtree | head -3`) or a Ctrl+C must stop
the diagram quietly and turn into exit status 141 or 130 rather than a traceback.
The handlers only record what arrived; SafeWriter checks the record before every
write and main() maps it to the exit status.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# Absent on Windows
SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records which interrupting signals arrived while the diagram was written.

    Each handler fires once: it sets its event, then puts back the handler that
    was installed before setup_signal_handling(), so a second Ctrl+C behaves as
    the platform default.

    Attributes:
        sigpipe_received: Set once the output pipe was closed by its reader.
        sigint_received: Set once the user pressed Ctrl+C.
        original_sigpipe_handler: Handler to reinstate after SIGPIPE; None without SIGPIPE.
        original_sigint_handler: Handler to reinstate after SIGINT.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(SIGPIPE) if SIGPIPE is not None else None
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        if SIGPIPE is not None:
            signal.signal(SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    @property
    def interrupted(self) -> bool:
        """Whether the diagram should stop: SIGPIPE or SIGINT has been seen."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()


# Shared by SafeWriter and main()
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Route SIGINT, and SIGPIPE where the platform has it, to signal_handler."""
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Point stdout at the null device after an interruption.

    The interpreter flushes stdout on exit; with the reader gone that flush would
    print a BrokenPipeError message on stderr.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
