"""Command line tool that connects to a broker and performs the handshake."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import timedelta

from purple.client_stream import ClientStream
from purple.connect import ConnectOptions, Will
from purple.errors import MqttError, ProtocolError

DEFAULT_HOST = "test.mosquitto.org"
DEFAULT_PORT = 1883
DEFAULT_CLIENT_ID = "ASIOMQTTCLIENT"
DEFAULT_KEEP_ALIVE = 10
WILL_TOPIC = "/asiomqtt"
WILL_PAYLOAD = b"Hello world"


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the handshake command."""
    parser = argparse.ArgumentParser(
        prog="purple", description="Connect to an MQTT broker and perform the handshake."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="broker host name")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="broker TCP port")
    parser.add_argument("--client-id", default=DEFAULT_CLIENT_ID, help="client identifier")
    parser.add_argument(
        "--keep-alive", type=int, default=DEFAULT_KEEP_ALIVE, help="keep alive in seconds"
    )
    return parser


async def run_handshake(host: str, port: int, client_id: str, keep_alive: int) -> bool:
    """Connect to ``host:port``, send CONNECT with a will and return session present."""
    print("Establishing TCP connection")
    reader, writer = await asyncio.open_connection(host, port)
    async with ClientStream(reader, writer) as client:
        print("TCP connection established, sending CONNECT")
        opts = ConnectOptions(
            client_id=client_id,
            keep_alive=timedelta(seconds=keep_alive),
            will=Will(topic=WILL_TOPIC, payload=WILL_PAYLOAD),
        )
        return await client.handshake(opts)


def main(argv: list[str] | None = None) -> int:
    """Run the handshake command, returning the exit status."""
    args = build_parser().parse_args(argv)
    try:
        present = asyncio.run(
            run_handshake(args.host, args.port, args.client_id, args.keep_alive)
        )
    except (MqttError, ProtocolError, EOFError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Handshake complete, session present = {int(present)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())