"""Send a message to a listening server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import List, Optional

from .chars import isdigit
from .codec import encode_bits
from .numbers import atoi
from .strings import strall

USAGE_MSG = "Usage: client [server PID] [message]"
PID_ERR_MSG = "Error: invalid PID"
SEND_ERR_MSG = "Error: failed to send signal"
DEFAULT_DELAY = 0.0001


class SendError(OSError):
    """A signal could not be delivered to the server."""


def parse_pid(text: str) -> int:
    """Parse a process id made only of decimal digits and greater than zero."""
    if not text or not strall(text, isdigit):
        raise ValueError(f"not a process id: {text!r}")
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"not a process id: {text!r}")
    return pid


def send_message(pid: int, message, delay: float = DEFAULT_DELAY) -> None:
    """Signal every bit of ``message`` to ``pid``, pausing ``delay`` seconds after each.

    Text is sent as the bytes a command-line argument would hold.
    """
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    for bit in encode_bits(data):
        signum = signal.SIGUSR2 if bit else signal.SIGUSR1
        try:
            os.kill(pid, signum)
        except OSError as exc:
            raise SendError(exc.errno, f"cannot signal process {pid}") from exc
        time.sleep(delay)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the client: ``client PID MESSAGE``. Returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE_MSG, file=sys.stderr)
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        print(PID_ERR_MSG, file=sys.stderr)
        return 1
    try:
        send_message(pid, args[1])
    except SendError:
        print(SEND_ERR_MSG, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())