"""The MQTT fixed header and its decoding."""

from __future__ import annotations

from dataclasses import dataclass, field

from purple.errors import ProtocolError

_MAX_LENGTH_BYTES = 4
_MAX_MULTIPLIER = 128 * 128 * 128


@dataclass(frozen=True)
class FixedHeader:
    """First byte of a control packet and the length of what follows it."""

    first_byte: int = 0
    remaining_length: int = 0


@dataclass(frozen=True)
class MessageView:
    """A fixed header together with the packet payload."""

    header: FixedHeader = field(default_factory=FixedHeader)
    payload: bytes = b""


def header_incomplete(data: bytes) -> bool:
    """Return True while ``data`` does not yet hold a whole fixed header.

    Raises :class:`ProtocolError` when the length field runs past its
    maximum size without terminating.
    """
    for index, value in enumerate(data[1:], start=1):
        if value < 128:
            return False
        if index > _MAX_LENGTH_BYTES:
            raise ProtocolError("Remaining length field is too long")
    return True


def decode_fixed_header(data: bytes) -> tuple[FixedHeader, int]:
    """Decode the fixed header at the start of ``data``.

    Returns the header and the number of bytes it occupies.
    """
    if len(data) < 2:
        raise ValueError("Not enough data for a fixed header")
    remaining = 0
    multiplier = 1
    for consumed, value in enumerate(data[1:], start=2):
        remaining += (value & 0x7F) * multiplier
        if value < 128:
            return FixedHeader(data[0], remaining), consumed
        multiplier *= 128
        if multiplier > _MAX_MULTIPLIER:
            raise ProtocolError("Remaining length field is too long")
    raise ValueError("Fixed header is incomplete")