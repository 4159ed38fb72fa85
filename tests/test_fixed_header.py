import pytest

from purple.bits import encode_varlen_int
from purple.errors import ProtocolError
from purple.fixed_header import (
    FixedHeader,
    MessageView,
    decode_fixed_header,
    header_incomplete,
)


def test_decode_small_packet():
    data = b"\x20\x03\x40\x41\x42"
    header, consumed = decode_fixed_header(data)
    assert header == FixedHeader(0x20, 0x03)
    assert data[consumed:] == b"\x40\x41\x42"


def test_decode_large_length():
    header, consumed = decode_fixed_header(b"\x20\x80\x80\x80\x01")
    assert header.first_byte == 0x20
    assert header.remaining_length == 2_097_152
    assert consumed == len(b"\x20\x80\x80\x80\x01")


def test_decode_empty_payload():
    header, _ = decode_fixed_header(b"\x20\x00\x40\x41\x42")
    assert header.remaining_length == 0


def test_decode_too_long_length_field():
    with pytest.raises(ProtocolError):
        decode_fixed_header(b"\x20\x80\x80\x80\x80\x00")


def test_decode_needs_two_bytes():
    with pytest.raises(ValueError):
        decode_fixed_header(b"\x20")


def test_decode_incomplete_length():
    with pytest.raises(ValueError):
        decode_fixed_header(b"\x20\x80")


@pytest.mark.parametrize("length", [0, 1, 127, 128, 16_383, 16_384, 268_435_455])
def test_round_trip(length):
    data = bytes([0x90]) + encode_varlen_int(length) + b"tail"
    header, consumed = decode_fixed_header(data)
    assert header == FixedHeader(0x90, length)
    assert data[consumed:] == b"tail"


@pytest.mark.parametrize("data", [b"", b"\x20", b"\x20\x80", b"\x20\x80\x80\x80\x80"])
def test_header_incomplete_true(data):
    assert header_incomplete(data) is True


@pytest.mark.parametrize("data", [b"\x20\x03", b"\x20\x80\x80\x80\x80\x00"])
def test_header_incomplete_false(data):
    assert header_incomplete(data) is False


def test_header_incomplete_rejects_overlong():
    with pytest.raises(ProtocolError):
        header_incomplete(b"\x20\x80\x80\x80\x80\x80")


def test_message_view_defaults():
    view = MessageView()
    assert view.header == FixedHeader()
    assert view.payload == b""