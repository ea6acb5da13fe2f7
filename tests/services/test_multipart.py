import pytest

from browserstack_xcuitest.errors import FileReadError
from browserstack_xcuitest.services.multipart import MultipartEncoder


def _single_part(encoded):
    boundary = encoded.content_type.split("boundary=", 1)[1].encode("ascii")
    body = encoded.body
    assert body.startswith(b"--" + boundary + b"\r\n")
    headers, rest = body.split(b"\r\n\r\n", 1)
    closing = b"\r\n--" + boundary + b"--\r\n"
    assert rest.endswith(closing)
    return headers.decode("utf-8"), rest[: -len(closing)]


def test_encode_file_preserves_binary_content(tmp_path):
    payload = bytes(range(256)) * 64 + b"\r\n--looks-like-a-boundary\r\n\x00"
    artifact = tmp_path / "app.ipa"
    artifact.write_bytes(payload)

    encoded = MultipartEncoder().encode_file(str(artifact))

    assert encoded.content_type.startswith("multipart/form-data; boundary=")
    headers, content = _single_part(encoded)
    assert content == payload
    assert 'name="file"' in headers
    assert 'filename="app.ipa"' in headers


def test_encode_file_handles_empty_file(tmp_path):
    artifact = tmp_path / "empty.zip"
    artifact.write_bytes(b"")

    _headers, content = _single_part(MultipartEncoder().encode_file(str(artifact)))

    assert content == b""


def test_encode_file_raises_file_read_error_for_missing_path(tmp_path):
    missing = tmp_path / "missing.ipa"

    with pytest.raises(FileReadError) as exc_info:
        MultipartEncoder().encode_file(str(missing))

    assert exc_info.value.path == str(missing)


def test_encode_file_raises_file_read_error_for_directory(tmp_path):
    with pytest.raises(FileReadError):
        MultipartEncoder().encode_file(str(tmp_path))
