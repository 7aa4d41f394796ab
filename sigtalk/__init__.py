"""Send text between processes as SIGUSR1/SIGUSR2 bit streams, with small helper modules."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "client",
    "codec",
    "formatting",
    "linkedlist",
    "memory",
    "numbers",
    "server",
    "strings",
    "textops",
]