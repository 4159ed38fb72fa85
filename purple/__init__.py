"""Asynchronous MQTT 3.1.1 packet framing, CONNECT encoding and client handshake."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "byte_buffer",
    "cli",
    "client_stream",
    "connect",
    "errors",
    "fixed_header",
    "read_buffer",
    "stream",
]