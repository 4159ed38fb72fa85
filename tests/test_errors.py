import pytest

from purple.errors import ErrorCode, MqttError, error_message


@pytest.mark.parametrize(
    ("code", "text"),
    [
        (ErrorCode.SUCCESS, "No error"),
        (ErrorCode.INVALID_CONNECT_RESPONSE, "Invalid CONNECT response"),
        (ErrorCode.UNACCEPTABLE_PROTOCOL_VERSION, "Unacceptable protocol version"),
        (ErrorCode.IDENTIFIER_REJECTED, "Identifier rejected"),
        (ErrorCode.SERVER_UNAVAILABLE, "Server unavailable"),
        (ErrorCode.BAD_USERNAME_OR_PASSWORD, "Bad username or password"),
        (ErrorCode.UNAUTHORIZED, "Unauthorized"),
        (ErrorCode.MESSAGE_TOO_LARGE, "Message too large"),
    ],
)
def test_message_texts(code, text):
    assert code.message() == text


@pytest.mark.parametrize("code", list(ErrorCode))
def test_error_message_matches_enum(code):
    assert error_message(int(code)) == code.message()


def test_unknown_code_message():
    assert error_message(42) == "Unknown MQTT error 42"


def test_mqtt_error_carries_code():
    err = MqttError(ErrorCode.UNAUTHORIZED)
    assert err.code is ErrorCode.UNAUTHORIZED
    assert str(err) == "Unauthorized"


def test_mqtt_error_from_int_becomes_enum():
    err = MqttError(int(ErrorCode.MESSAGE_TOO_LARGE))
    assert err.code is ErrorCode.MESSAGE_TOO_LARGE


def test_mqtt_error_unknown_code_kept():
    err = MqttError(100)
    assert err.code == 100
    assert str(err).startswith("Unknown MQTT error")


def test_category_name():
    err = MqttError(ErrorCode.SERVER_UNAVAILABLE)
    assert err.category == "purple mqtt"
    assert str(err) == "Server unavailable"