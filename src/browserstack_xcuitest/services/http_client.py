"""Authenticated JSON requests against the BrowserStack REST API."""

from typing import Any, Dict, Optional

import requests

from browserstack_xcuitest.constants import REQUEST_TIMEOUT
from browserstack_xcuitest.errors import DecodeError, MissingFieldError, NetworkError, RemoteError


class ApiClient:
    """Issues basic-auth requests and returns decoded JSON objects.

    A call succeeds only when the status code is 2xx and the body decodes to a
    JSON object. Anything else raises a distinct error kind so callers can tell
    transport failures, bad bodies and rejected requests apart.
    """

    def __init__(
        self,
        base_url: str,
        credentials,
        logger,
        requests_module=requests,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials
        self.logger = logger
        self.requests = requests_module
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str) -> Dict[str, Any]:
        return self.request("GET", path)

    def post(self, path: str, body: bytes, content_type: str) -> Dict[str, Any]:
        return self.request("POST", path, body=body, content_type=content_type)

    def request(
        self,
        method: str,
        path: str,
        body: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = self.url_for(path)
        headers = {"Accept": "application/json"}
        if content_type:
            headers["Content-Type"] = content_type

        self.logger.info("%s request: %s", method, url)
        try:
            response = self.requests.request(
                method,
                url,
                data=body,
                headers=headers,
                auth=self.credentials.as_auth(),
                timeout=self.timeout,
            )
        except self.requests.RequestException as exc:
            raise NetworkError(method, url, exc) from exc

        status_code = response.status_code
        self.logger.info("Response status code: %s", status_code)

        decoded: Optional[Dict[str, Any]] = None
        decode_problem: Any = None
        try:
            payload = response.json()
        except ValueError as exc:
            decode_problem = exc
        else:
            if isinstance(payload, dict):
                decoded = payload
            else:
                decode_problem = f"expected an object, got {type(payload).__name__}"

        if decoded is not None:
            self.logger.info("Response: %s", decoded)

        if not 200 <= status_code <= 299:
            raise RemoteError(method, url, status_code, decoded)

        if decoded is None:
            raise DecodeError(method, url, status_code, decode_problem)

        return decoded


def require_string_field(response: Dict[str, Any], field: str, url: str) -> str:
    value = response.get(field)
    if not isinstance(value, str):
        raise MissingFieldError(field, url)
    return value
