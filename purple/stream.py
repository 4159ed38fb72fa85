"""Framed MQTT packet stream over an asyncio transport."""

from __future__ import annotations

import asyncio
from typing import Protocol

from purple.bits import encode_varlen_int
from purple.byte_buffer import ByteBuffer
from purple.errors import ErrorCode, MqttError
from purple.fixed_header import FixedHeader, decode_fixed_header, header_incomplete
from purple.read_buffer import ReadBuffer

_DEFAULT_BUFFER_SIZE = 1024
_MIN_BUFFER_SIZE = 5


class _Writer(Protocol):
    def write(self, data: bytes) -> None: ...

    async def drain(self) -> None: ...

    def close(self) -> None: ...

    async def wait_closed(self) -> None: ...


class Stream:
    """Reads and writes whole MQTT control packets.

    Bytes read past the end of one packet are kept in an internal buffer
    and used by the next read.
    """

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: _Writer,
        read_buffer_size: int = _DEFAULT_BUFFER_SIZE,
        write_buffer_size: int = _DEFAULT_BUFFER_SIZE,
    ) -> None:
        if read_buffer_size < _MIN_BUFFER_SIZE:
            raise ValueError("The internal read buffer must be at least 5 bytes long")
        if write_buffer_size < _MIN_BUFFER_SIZE:
            raise ValueError("The internal write buffer must be at least 5 bytes long")
        self.reader = reader
        self.writer = writer
        self._read_buffer = ReadBuffer(read_buffer_size)
        self._write_capacity = write_buffer_size

    async def __aenter__(self) -> Stream:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _fill_header(self) -> None:
        while header_incomplete(self._read_buffer.data):
            if self._read_buffer.writable_capacity() == 0:
                raise BufferError("Cannot grow the read buffer!")
            chunk = await self.reader.read(self._read_buffer.writable_capacity())
            if not chunk:
                raise EOFError("Connection closed while reading a fixed header")
            self._read_buffer.feed(chunk)

    def _take_buffered(self, limit: int) -> bytes:
        buffered = self._read_buffer.data[:limit]
        self._read_buffer.consume(len(buffered))
        return buffered

    async def _read_payload(self, left: int):
        while left > 0:
            chunk = await self.reader.read(left)
            if not chunk:
                raise EOFError("Connection closed while reading a packet payload")
            left -= len(chunk)
            yield chunk

    async def read(self, buffer: ByteBuffer) -> FixedHeader:
        """Read one packet, appending its payload to ``buffer``.

        Raises ProtocolError on a malformed length field, EOFError when the
        peer closes mid-packet and BufferError when ``buffer`` overflows.
        """
        await self._fill_header()
        header, header_len = decode_fixed_header(self._read_buffer.data)
        self._read_buffer.consume(header_len)

        buffered = self._take_buffered(header.remaining_length)
        if buffered:
            buffer.append(buffered)
        async for chunk in self._read_payload(header.remaining_length - len(buffered)):
            buffer.append(chunk)
        return header

    async def read_into(self, buffer: bytearray | memoryview) -> FixedHeader:
        """Read one packet, storing its payload at the start of ``buffer``.

        Raises MqttError with MESSAGE_TOO_LARGE, leaving the packet unread,
        when the payload does not fit.
        """
        await self._fill_header()
        header, header_len = decode_fixed_header(self._read_buffer.data)
        view = memoryview(buffer)
        if header.remaining_length > view.nbytes:
            raise MqttError(ErrorCode.MESSAGE_TOO_LARGE)
        self._read_buffer.consume(header_len)

        buffered = self._take_buffered(header.remaining_length)
        position = len(buffered)
        view[:position] = buffered
        async for chunk in self._read_payload(header.remaining_length - position):
            view[position : position + len(chunk)] = chunk
            position += len(chunk)
        return header

    async def write(self, first_byte: int, data: bytes) -> int:
        """Send a packet with the given first byte and payload.

        Returns the number of bytes written, fixed header included.
        """
        if not 0 <= first_byte <= 0xFF:
            raise ValueError("first_byte must fit in one byte")
        payload = bytes(data)
        header = bytes([first_byte]) + encode_varlen_int(len(payload))
        if len(header) + len(payload) < self._write_capacity:
            self.writer.write(header + payload)
        else:
            self.writer.write(header)
            self.writer.write(payload)
        await self.writer.drain()
        return len(header) + len(payload)

    def reset(self) -> None:
        """Forget any bytes read ahead but not yet returned."""
        self._read_buffer.reset()

    async def close(self) -> None:
        """Close the underlying transport."""
        self.writer.close()
        await self.writer.wait_closed()