"""MQTT 3.1.1 client stream performing the CONNECT handshake."""

from __future__ import annotations

import asyncio

from purple.connect import ConnectOptions
from purple.errors import ErrorCode, MqttError
from purple.stream import Stream

CONNECT = 0x10
CONNACK = 0x20

_RETURN_CODES = {
    1: ErrorCode.UNACCEPTABLE_PROTOCOL_VERSION,
    2: ErrorCode.IDENTIFIER_REJECTED,
    3: ErrorCode.SERVER_UNAVAILABLE,
    4: ErrorCode.BAD_USERNAME_OR_PASSWORD,
    5: ErrorCode.UNAUTHORIZED,
}


class ClientStream:
    """Client side of an MQTT 3.1.1 connection on top of a packet stream."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer,
        read_buffer_size: int = 1024,
        write_buffer_size: int = 1024,
    ) -> None:
        self.stream = Stream(reader, writer, read_buffer_size, write_buffer_size)

    @property
    def next_layer(self) -> Stream:
        """The packet stream this client talks through."""
        return self.stream

    async def __aenter__(self) -> ClientStream:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def handshake(self, opts: ConnectOptions) -> bool:
        """Send CONNECT and wait for CONNACK.

        Returns whether the broker has a session present. Raises MqttError
        when the response is malformed or the broker refuses the connection.
        """
        body = opts.encode()
        await self.stream.write(CONNECT, body)
        response = bytearray(len(body))
        header = await self.stream.read_into(response)
        if header.first_byte != CONNACK or header.remaining_length != 2:
            raise MqttError(ErrorCode.INVALID_CONNECT_RESPONSE)
        refusal = _RETURN_CODES.get(response[1])
        if refusal is not None:
            raise MqttError(refusal)
        return response[0] == 1

    async def close(self) -> None:
        """Close the underlying transport."""
        await self.stream.close()