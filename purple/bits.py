"""Encoding helpers for MQTT wire primitives."""

from __future__ import annotations

_VARLEN_LIMIT = 268_435_456
_U16_MAX = 0xFFFF


def num_varlen_int_bytes(value: int) -> int:
    """Number of bytes needed to encode ``value`` as a variable length integer."""
    if value < 0:
        raise ValueError("Variable length integers cannot be negative")
    if value < 128:
        return 1
    if value < 16_384:
        return 2
    if value < 2_097_152:
        return 3
    if value < _VARLEN_LIMIT:
        return 4
    raise ValueError("Value cannot be encoded as varlen integer")


def encode_varlen_int(value: int) -> bytes:
    """Encode ``value`` as an MQTT variable length integer."""
    num_varlen_int_bytes(value)
    out = bytearray()
    while True:
        digit = value % 128
        value //= 128
        if value > 0:
            digit |= 0x80
        out.append(digit)
        if value == 0:
            return bytes(out)


def encode_u16(value: int) -> bytes:
    """Encode ``value`` as a big endian 16-bit integer."""
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{value} does not fit in 16 bits")
    return value.to_bytes(2, "big")


def encode_bin(value: bytes) -> bytes:
    """Encode binary data prefixed by its 16-bit length."""
    data = bytes(value)
    return encode_u16(len(data)) + data


def encode_str(value: str) -> bytes:
    """Encode a UTF-8 string prefixed by its 16-bit length."""
    return encode_bin(value.encode("utf-8"))