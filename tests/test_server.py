import io
import os
import signal

import pytest

from sigtalk.client import send_message
from sigtalk.codec import encode_bits
from sigtalk.server import Server


def _signal_for(bit):
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def _deliver(server, data):
    for bit in encode_bits(data):
        server.handle_signal(_signal_for(bit), None)


@pytest.fixture
def restore_handlers():
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


def test_handle_signal_writes_bytes():
    out = io.BytesIO()
    server = Server(out)
    _deliver(server, b"hello")
    assert out.getvalue() == b"hello"


def test_partial_byte_not_written():
    out = io.BytesIO()
    server = Server(out)
    for signum in (signal.SIGUSR2, signal.SIGUSR1, signal.SIGUSR2):
        server.handle_signal(signum, None)
    assert out.getvalue() == b""
    assert server.decoder.count == 3


def test_binary_data_passes_through():
    out = io.BytesIO()
    server = Server(out)
    data = bytes(range(256))
    _deliver(server, data)
    assert out.getvalue() == data


def test_install_sets_handlers(restore_handlers):
    server = Server(io.BytesIO())
    server.install()
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal
    assert signal.getsignal(signal.SIGUSR2) == server.handle_signal


def test_real_signals_round_trip(restore_handlers):
    out = io.BytesIO()
    server = Server(out)
    server.install()
    send_message(os.getpid(), "hi", 0)
    assert out.getvalue() == b"hi"