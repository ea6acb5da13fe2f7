"""Domain errors for browserstack-xcuitest."""

from typing import Any, Dict, Optional, Sequence

from browserstack_xcuitest.errors_catalog import actionable_error


class RunnerError(RuntimeError):
    """Raised when the run cannot continue. Every failure is fatal."""


class ConfigError(RunnerError):
    """A required input is missing or a setting is invalid."""

    def __init__(self, message: str, missing: Sequence[str] = ()):
        super().__init__(message)
        self.missing = tuple(missing)

    @classmethod
    def for_missing(cls, names: Sequence[str]) -> "ConfigError":
        return cls(actionable_error("missing_input", names=", ".join(names)), missing=names)


class NetworkError(RunnerError):
    """Transport-level failure: connection refused, timeout, DNS."""

    def __init__(self, method: str, url: str, cause: Exception):
        super().__init__(actionable_error("network_failure", method=method, url=url, cause=cause))
        self.method = method
        self.url = url
        self.cause = cause


class DecodeError(RunnerError):
    """A successful response body is not a JSON object."""

    def __init__(self, method: str, url: str, status_code: int, cause: Any):
        super().__init__(
            actionable_error(
                "invalid_json",
                method=method,
                url=url,
                status_code=status_code,
                cause=cause,
            )
        )
        self.method = method
        self.url = url
        self.status_code = status_code
        self.cause = cause


class RemoteError(RunnerError):
    """The service answered with a status code outside 2xx."""

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        body: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            actionable_error(
                "remote_status",
                method=method,
                url=url,
                status_code=status_code,
                body=body if body is not None else "<not JSON>",
            )
        )
        self.method = method
        self.url = url
        self.status_code = status_code
        self.body = body


class MissingFieldError(RunnerError):
    """An expected string field is absent from a successful response."""

    def __init__(self, field: str, url: str):
        super().__init__(actionable_error("missing_field", field=field, url=url))
        self.field = field
        self.url = url


class FileReadError(RunnerError):
    def __init__(self, path: str, cause: Any):
        super().__init__(actionable_error("file_unreadable", path=path, cause=cause))
        self.path = path
        self.cause = cause


class UnsupportedStatusError(RunnerError):
    def __init__(self, status: str, build_id: str):
        super().__init__(actionable_error("unsupported_status", status=status, build_id=build_id))
        self.status = status
        self.build_id = build_id


class PublishError(RunnerError):
    def __init__(self, key: str, cause: Any):
        super().__init__(actionable_error("publish_failed", key=key, cause=cause))
        self.key = key
        self.cause = cause
