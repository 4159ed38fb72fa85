import asyncio
from datetime import timedelta

import pytest

from purple.client_stream import ClientStream
from purple.connect import ConnectOptions
from purple.errors import ErrorCode, MqttError


class FakeWriter:
    def __init__(self):
        self.data = bytearray()
        self.closed = False

    def write(self, data):
        self.data += data

    async def drain(self):
        pass

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass


def make_client(response):
    reader = asyncio.StreamReader()
    reader.feed_data(response)
    writer = FakeWriter()
    return ClientStream(reader, writer), writer


def options():
    return ConnectOptions(client_id="ASIOMQTTCLIENT", keep_alive=timedelta(seconds=10))


@pytest.mark.asyncio
async def test_handshake_sends_connect_packet():
    client, writer = make_client(b"\x20\x02\x00\x00")
    await client.handshake(options())
    assert bytes(writer.data) == (
        b"\x10\x1a\x00\x04MQTT\x04\x02\x00\x0a\x00\x0eASIOMQTTCLIENT"
    )


@pytest.mark.asyncio
async def test_handshake_session_present():
    client, _ = make_client(b"\x20\x02\x01\x00")
    assert await client.handshake(options()) is True


@pytest.mark.asyncio
async def test_handshake_no_session():
    client, _ = make_client(b"\x20\x02\x00\x00")
    assert await client.handshake(options()) is False


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "return_code, expected",
    [
        (1, ErrorCode.UNACCEPTABLE_PROTOCOL_VERSION),
        (2, ErrorCode.IDENTIFIER_REJECTED),
        (3, ErrorCode.SERVER_UNAVAILABLE),
        (4, ErrorCode.BAD_USERNAME_OR_PASSWORD),
        (5, ErrorCode.UNAUTHORIZED),
    ],
)
async def test_handshake_refused(return_code, expected):
    client, _ = make_client(bytes([0x20, 0x02, 0x00, return_code]))
    with pytest.raises(MqttError) as info:
        await client.handshake(options())
    assert info.value.code == expected


@pytest.mark.asyncio
async def test_handshake_wrong_packet_type():
    client, _ = make_client(b"\x30\x02\x00\x00")
    with pytest.raises(MqttError) as info:
        await client.handshake(options())
    assert info.value.code == ErrorCode.INVALID_CONNECT_RESPONSE


@pytest.mark.asyncio
async def test_handshake_wrong_length():
    client, _ = make_client(b"\x20\x03\x00\x00\x00")
    with pytest.raises(MqttError) as info:
        await client.handshake(options())
    assert info.value.code == ErrorCode.INVALID_CONNECT_RESPONSE


@pytest.mark.asyncio
async def test_handshake_connection_closed():
    reader = asyncio.StreamReader()
    reader.feed_data(b"\x20")
    reader.feed_eof()
    client = ClientStream(reader, FakeWriter())
    with pytest.raises(EOFError):
        await client.handshake(options())


@pytest.mark.asyncio
async def test_close_closes_writer():
    client, writer = make_client(b"")
    async with client:
        assert writer.closed is False
    assert writer.closed is True


@pytest.mark.asyncio
async def test_next_layer_is_stream():
    client, _ = make_client(b"")
    assert client.next_layer is client.stream