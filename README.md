# purple

`purple` is a small asynchronous MQTT 3.1.1 toolkit built on `asyncio`
streams. It handles packet framing, the encoding of CONNECT packets and the
client side of the connection handshake. It needs nothing beyond the Python
3.10+ standard library.

## Installation

```
pip install purple
```

## Packet framing

`purple.stream.Stream` wraps an `asyncio.StreamReader` and its writer and
exchanges whole MQTT control packets:

- `await stream.read(buffer)` reads one packet, appends its payload to a
  `purple.byte_buffer.ByteBuffer` and returns the packet's
  `purple.fixed_header.FixedHeader` (`first_byte`, `remaining_length`).
- `await stream.read_into(buffer)` stores the payload at the start of a
  `bytearray` or `memoryview`. If the payload does not fit, it raises
  `purple.errors.MqttError` with `ErrorCode.MESSAGE_TOO_LARGE` and leaves the
  packet unread.
- `await stream.write(first_byte, data)` sends the fixed header followed by
  the payload and returns the number of bytes written, header included.
- `stream.reset()` drops bytes that were read ahead but not yet returned.
- `await stream.close()` closes the writer. A `Stream` is also an async
  context manager that closes on exit.

Bytes received past the end of one packet are kept for the next read. Both
internal buffer sizes default to 1024 bytes and must be at least 5 bytes;
smaller values raise `ValueError`.

Reads raise `purple.errors.ProtocolError` when the remaining-length field is
longer than four bytes. They raise `EOFError` when the peer closes mid-packet,
and `BufferError` when a `ByteBuffer` would exceed its `max_size`.

`ByteBuffer(max_size)` supports `len()`, indexing, slicing, iteration and
`bytes()`. It also offers `at(index)`, which raises `IndexError` out of range,
along with `append(data)`, `clear()` and the `free` property.

## CONNECT options and the handshake

`purple.connect` has three classes:

- `ConnectOptions` has the fields `client_id`, `username`, `password`,
  `will`, `keep_alive` (a `datetime.timedelta`) and `clean_session`.
- `Will` has the fields `topic`, `payload`, `qos` and `retain`.
- `QoS` has the levels `QOS0`, `QOS1` and `QOS2`.

`ConnectOptions` has three methods:

- `flag_byte()` returns the connect flags.
- `wire_size()` returns the encoded size.
- `encode()` returns the packet body without its fixed header.

`purple.client_stream.ClientStream` sends the CONNECT packet and checks the
CONNACK:

```python
import asyncio
from datetime import timedelta

from purple.client_stream import ClientStream
from purple.connect import ConnectOptions, Will


async def connect(host: str, port: int) -> bool:
    reader, writer = await asyncio.open_connection(host, port)
    async with ClientStream(reader, writer) as client:
        opts = ConnectOptions(
            client_id="example-client",
            keep_alive=timedelta(seconds=10),
            will=Will(topic="/status", payload=b"offline"),
        )
        return await client.handshake(opts)  # session present
```

`handshake` raises `MqttError` in two cases. It raises with
`INVALID_CONNECT_RESPONSE` when the reply is not a two-byte CONNACK. It raises
with the matching refusal code when the broker refuses:

- `UNACCEPTABLE_PROTOCOL_VERSION`
- `IDENTIFIER_REJECTED`
- `SERVER_UNAVAILABLE`
- `BAD_USERNAME_OR_PASSWORD`
- `UNAUTHORIZED`

`MqttError.code` holds the `ErrorCode`. `ErrorCode.message()` and
`purple.errors.error_message(value)` give readable descriptions; an unknown
value is described as "Unknown MQTT error N".

## Low-level helpers

`purple.bits` provides the wire-format primitives:

- `num_varlen_int_bytes(value)` returns 1 to 4. It raises `ValueError` for
  negative values and for values of 268,435,456 and above.
- `encode_varlen_int(value)` encodes a variable-length integer.
- `encode_u16(value)` encodes a big-endian 16-bit integer.
- `encode_bin(value)` encodes length-prefixed bytes.
- `encode_str(value)` encodes a length-prefixed UTF-8 string.

`purple.fixed_header` provides these:

- `FixedHeader` and `MessageView`.
- `header_incomplete(data)` returns `True` while more bytes are needed.
- `decode_fixed_header(data)` returns the header and the number of bytes it
  took.

`purple.read_buffer.ReadBuffer` is the bounded buffer that a `Stream` reads
ahead into. It offers `feed`, `consume`, `reset` and `writable_capacity`.

## Command line

```
purple-handshake --host HOST --port 1883 --client-id ID --keep-alive 10
```

The command has the following options:

- `--host` is the broker host. It defaults to a public test broker.
- `--port` defaults to 1883.
- `--client-id` defaults to `ASIOMQTTCLIENT`.
- `--keep-alive` is in seconds and defaults to 10.

The command opens a TCP connection and sends CONNECT with a will on topic
`/asiomqtt`. On success it prints
`Handshake complete, session present = N` and exits with status 0. On an MQTT,
framing or network error it prints `Error: ...` to standard error and exits
with status 1. `python -m purple.cli` does the same.

## What it does not do

Only the handshake is covered. There is no PUBLISH, SUBSCRIBE or PINGREQ
support, no keep-alive timer, no reconnection and no TLS set-up. Any other
packet can still be sent with `Stream.write` and received with `Stream.read`,
with its payload encoded and decoded by the caller.