"""Receive messages sent one bit per signal and print them as they arrive."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, List, Optional

from .codec import BitDecoder
from .formatting import format_message

PID_FORMAT = "server PID: %d\n"


class Server:
    """Decodes SIGUSR1 (0) and SIGUSR2 (1) into bytes written to ``output``."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.decoder = BitDecoder()

    def handle_signal(self, signum, frame) -> None:
        """Take one bit from a signal and write the byte once eight have come."""
        byte = self.decoder.feed(1 if signum == signal.SIGUSR2 else 0)
        if byte is not None:
            self.output.write(bytes([byte]))
            self.output.flush()

    def install(self) -> None:
        """Make this server the handler for SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def run(self) -> None:
        """Install the handlers, announce the process id and wait for signals forever."""
        self.install()
        self.output.write(format_message(PID_FORMAT, os.getpid()).encode())
        self.output.flush()
        while True:
            signal.pause()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the server until interrupted."""
    try:
        Server().run()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())