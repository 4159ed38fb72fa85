"""MQTT 3.1.1 CONNECT packet options and encoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import timedelta

from purple.bits import encode_bin, encode_str, encode_u16

_PROTOCOL_HEADER = b"\x00\x04MQTT\x04"


class QoS(enum.IntEnum):
    """Quality of service levels."""

    QOS0 = 0
    QOS1 = 1
    QOS2 = 2


@dataclass
class Will:
    """Last will message published by the broker if the client vanishes."""

    topic: str = ""
    payload: bytes = b""
    qos: QoS = QoS.QOS1
    retain: bool = False


@dataclass
class ConnectOptions:
    """Variable header and payload of a CONNECT packet."""

    client_id: str = ""
    username: str | None = None
    password: bytes | None = None
    will: Will | None = None
    keep_alive: timedelta = timedelta(0)
    clean_session: bool = True

    def flag_byte(self) -> int:
        """The connect flags byte."""
        flags = 0x02 if self.clean_session else 0
        if self.username is not None:
            flags |= 0x80
            if self.password is not None:
                flags |= 0x40
        if self.will is not None:
            flags |= 0x04
            flags |= int(self.will.qos) << 3
            if self.will.retain:
                flags |= 0x20
        return flags

    def wire_size(self) -> int:
        """Size in bytes of the encoded packet body."""
        size = 10 + 2 + len(self.client_id.encode("utf-8"))
        if self.username is not None:
            size += 2 + len(self.username.encode("utf-8"))
            if self.password is not None:
                size += 2 + len(self.password)
        if self.will is not None:
            size += 4 + len(self.will.topic.encode("utf-8")) + len(self.will.payload)
        return size

    def encode(self) -> bytes:
        """Encode the packet body, without the fixed header."""
        parts = [
            _PROTOCOL_HEADER,
            bytes([self.flag_byte()]),
            encode_u16(int(self.keep_alive.total_seconds())),
            encode_str(self.client_id),
        ]
        if self.will is not None:
            parts.append(encode_str(self.will.topic))
            parts.append(encode_bin(self.will.payload))
        if self.username is not None:
            parts.append(encode_str(self.username))
            if self.password is not None:
                parts.append(encode_bin(self.password))
        return b"".join(parts)