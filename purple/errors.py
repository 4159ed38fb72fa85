"""Error codes and exceptions raised by the MQTT stream layer."""

from __future__ import annotations

import enum

CATEGORY = "purple mqtt"


class ErrorCode(enum.IntEnum):
    """Failure reasons reported by the stream and handshake operations."""

    SUCCESS = 0
    INVALID_CONNECT_RESPONSE = 1
    UNACCEPTABLE_PROTOCOL_VERSION = 2
    IDENTIFIER_REJECTED = 3
    SERVER_UNAVAILABLE = 4
    BAD_USERNAME_OR_PASSWORD = 5
    UNAUTHORIZED = 6
    MESSAGE_TOO_LARGE = 7

    def message(self) -> str:
        """Human readable description of this code."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.SUCCESS: "No error",
    ErrorCode.INVALID_CONNECT_RESPONSE: "Invalid CONNECT response",
    ErrorCode.UNACCEPTABLE_PROTOCOL_VERSION: "Unacceptable protocol version",
    ErrorCode.IDENTIFIER_REJECTED: "Identifier rejected",
    ErrorCode.SERVER_UNAVAILABLE: "Server unavailable",
    ErrorCode.BAD_USERNAME_OR_PASSWORD: "Bad username or password",
    ErrorCode.UNAUTHORIZED: "Unauthorized",
    ErrorCode.MESSAGE_TOO_LARGE: "Message too large",
}


def error_message(value: int) -> str:
    """Describe an error code given as an integer, known or not."""
    try:
        return ErrorCode(value).message()
    except ValueError:
        return f"Unknown MQTT error {value}"


class MqttError(Exception):
    """An MQTT level failure carrying an :class:`ErrorCode`."""

    category = CATEGORY

    def __init__(self, code: ErrorCode | int) -> None:
        try:
            code = ErrorCode(code)
        except ValueError:
            pass
        self.code = code
        super().__init__(error_message(int(code)))


class ProtocolError(Exception):
    """Raised when bytes on the wire violate the MQTT framing rules."""

    def __init__(self, message: str = "Protocol error") -> None:
        super().__init__(message)