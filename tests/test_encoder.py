import orjson
import pytest

from webdriver_http.encoder import encode, to_params
from webdriver_http.exceptions import FatalWebDriverError, RequestEncodingError
from webdriver_http.models import Command, Method, RequestOptions


@pytest.mark.parametrize("method", list(Method))
def test_empty_params_encode_to_empty_body(method):
    assert encode(Command.build(method, "http://localhost:4444/session")) == ""
    assert encode(Command.build(method, "http://localhost:4444/session", {})) == ""


def test_empty_params_ignore_encode_json_flag():
    command = Command.build(
        "POST", "http://localhost/x", {}, RequestOptions(encode_json=False)
    )
    assert encode(command) == ""


def test_raw_params_pass_through_untouched():
    raw = '{"desiredCapabilities": {"browserName": "firefox"}}'
    command = Command.build(
        "POST", "http://localhost/session", raw, RequestOptions(encode_json=False)
    )
    assert encode(command) is raw


def test_params_are_json_encoded():
    params = {"using": "css selector", "value": "#main", "nested": {"n": [1, 2]}}
    body = encode(Command.build("POST", "http://localhost/element", params))

    assert orjson.loads(body) == params


def test_unserializable_params_fail_fatally():
    command = Command.build("POST", "http://localhost/element", {"value": object()})

    with pytest.raises(RequestEncodingError) as exc_info:
        encode(command)

    assert isinstance(exc_info.value, FatalWebDriverError)
    assert "http://localhost/element" in str(exc_info.value)


def test_to_params_for_supported_strategies():
    assert to_params(("xpath", "//div")) == {"using": "xpath", "value": "//div"}
    assert to_params(("css", ".item")) == {"using": "css selector", "value": ".item"}


def test_to_params_rejects_unknown_strategy():
    with pytest.raises(ValueError):
        to_params(("link text", "Home"))


def test_raw_bytes_pass_through_untouched():
    raw = b'{"args": []}'
    command = Command.build("POST", "http://localhost/x", raw, RequestOptions(encode_json=False))
    assert encode(command) is raw


@pytest.mark.parametrize("params", [{"a": 1}, ["a", 1]])
def test_raw_params_must_be_text(params):
    command = Command.build(
        "POST", "http://localhost/execute", params, RequestOptions(encode_json=False)
    )

    with pytest.raises(RequestEncodingError) as exc_info:
        encode(command)

    assert "must be str or bytes" in str(exc_info.value)


def test_non_string_keys_are_encoded_as_strings():
    body = encode(Command.build("POST", "http://localhost/keys", {1: "a", "b": {2: True}}))

    assert orjson.loads(body) == {"1": "a", "b": {"2": True}}
