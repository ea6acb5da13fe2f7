import json

import pytest

from browserstack_xcuitest.errors import DecodeError, MissingFieldError, NetworkError, RemoteError
from browserstack_xcuitest.models import Credentials
from browserstack_xcuitest.services.http_client import ApiClient, require_string_field


class DummyLogger:
    def __init__(self):
        self.lines = []

    def info(self, message, *args, **_kwargs):
        self.lines.append(message % args)

    def debug(self, message, *args, **_kwargs):
        self.lines.append(message % args)


class FakeResponse:
    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeRequestsModule:
    class RequestException(Exception):
        pass

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def _client(requests_module, logger=None):
    return ApiClient(
        base_url="https://api.example.com/",
        credentials=Credentials("user", "secret"),
        logger=logger or DummyLogger(),
        requests_module=requests_module,
    )


def test_request_returns_decoded_object_and_sends_basic_auth():
    requests_module = FakeRequestsModule(FakeResponse(200, '{"app_url": "bs://abc", "n": 1}'))
    client = _client(requests_module)

    result = client.post("/app-automate/upload", b"payload", "multipart/form-data; boundary=x")

    assert result == {"app_url": "bs://abc", "n": 1}
    method, url, kwargs = requests_module.calls[0]
    assert method == "POST"
    assert url == "https://api.example.com/app-automate/upload"
    assert kwargs["auth"] == ("user", "secret")
    assert kwargs["data"] == b"payload"
    assert kwargs["headers"]["Content-Type"] == "multipart/form-data; boundary=x"


def test_get_sends_no_body_or_content_type():
    requests_module = FakeRequestsModule(FakeResponse(204, '{"status": "running"}'))
    client = _client(requests_module)

    assert client.get("/app-automate/xcuitest/builds/b1") == {"status": "running"}

    method, _url, kwargs = requests_module.calls[0]
    assert method == "GET"
    assert kwargs["data"] is None
    assert "Content-Type" not in kwargs["headers"]


def test_non_2xx_status_raises_remote_error_with_body():
    requests_module = FakeRequestsModule(FakeResponse(401, '{"error": "Unauthorized"}'))
    client = _client(requests_module)

    with pytest.raises(RemoteError) as exc_info:
        client.get("/app-automate/xcuitest/builds/b1")

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == {"error": "Unauthorized"}
    assert "401" in str(exc_info.value)


def test_non_2xx_status_with_invalid_body_is_still_remote_error():
    requests_module = FakeRequestsModule(FakeResponse(502, "<html>Bad Gateway</html>"))
    client = _client(requests_module)

    with pytest.raises(RemoteError) as exc_info:
        client.get("/app-automate/xcuitest/builds/b1")

    assert exc_info.value.status_code == 502
    assert exc_info.value.body is None


def test_success_status_with_invalid_json_raises_decode_error():
    requests_module = FakeRequestsModule(FakeResponse(200, "not json"))
    client = _client(requests_module)

    with pytest.raises(DecodeError) as exc_info:
        client.get("/app-automate/xcuitest/builds/b1")

    assert exc_info.value.status_code == 200


def test_success_status_with_non_object_json_raises_decode_error():
    requests_module = FakeRequestsModule(FakeResponse(200, '["a", "b"]'))
    client = _client(requests_module)

    with pytest.raises(DecodeError, match="expected an object"):
        client.get("/app-automate/xcuitest/builds/b1")


def test_transport_failure_raises_network_error():
    cause = FakeRequestsModule.RequestException("connection refused")
    requests_module = FakeRequestsModule(error=cause)
    client = _client(requests_module)

    with pytest.raises(NetworkError) as exc_info:
        client.get("/app-automate/xcuitest/builds/b1")

    assert exc_info.value.cause is cause
    assert exc_info.value.url == "https://api.example.com/app-automate/xcuitest/builds/b1"
    assert "connection refused" in str(exc_info.value)


def test_require_string_field_rejects_missing_and_non_string_values():
    assert require_string_field({"build_id": "b1"}, "build_id", "u") == "b1"

    with pytest.raises(MissingFieldError, match="build_id"):
        require_string_field({}, "build_id", "u")

    with pytest.raises(MissingFieldError) as exc_info:
        require_string_field({"build_id": 42}, "build_id", "https://api.example.com/build")

    assert exc_info.value.field == "build_id"
    assert exc_info.value.url == "https://api.example.com/build"


def test_request_logs_method_url_status_and_body_without_password():
    logger = DummyLogger()
    requests_module = FakeRequestsModule(FakeResponse(200, '{"status": "running"}'))
    client = _client(requests_module, logger=logger)

    client.get("/app-automate/xcuitest/builds/b1")

    assert "GET request: https://api.example.com/app-automate/xcuitest/builds/b1" in logger.lines
    assert "Response status code: 200" in logger.lines
    assert "Response: {'status': 'running'}" in logger.lines
    assert not any("secret" in line for line in logger.lines)
