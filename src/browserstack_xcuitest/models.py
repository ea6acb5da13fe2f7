"""Shared domain models for browserstack-xcuitest."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .constants import (
    DEFAULT_API_URL,
    DEFAULT_DEVICES,
    DEFAULT_OUTPUT_KEY,
    DEFAULT_POLL_INTERVAL,
)
from .errors import ConfigError


@dataclass(frozen=True)
class Credentials:
    """Basic-auth pair shared read-only by every remote call."""

    username: str
    password: str = field(repr=False)

    def as_auth(self) -> Tuple[str, str]:
        return (self.username, self.password)


@dataclass(frozen=True)
class RunConfig:
    """Everything a run needs, resolved once at startup."""

    credentials: Credentials
    app_path: str
    test_suite_path: str
    devices: Tuple[str, ...] = DEFAULT_DEVICES
    device_logs: bool = True
    poll_interval: float = DEFAULT_POLL_INTERVAL
    api_url: str = DEFAULT_API_URL
    allow_insecure_http: bool = False
    output_key: str = DEFAULT_OUTPUT_KEY
    dry_run: bool = False
    log_file: Optional[str] = None


@dataclass(frozen=True)
class EncodedBody:
    """A fully buffered request body and its Content-Type header."""

    body: bytes
    content_type: str


@dataclass(frozen=True)
class UploadResult:
    app_url: str
    test_suite_url: str


@dataclass(frozen=True)
class BuildRequest:
    app_url: str
    test_suite_url: str
    devices: Tuple[str, ...]
    device_logs: bool = True

    def __post_init__(self):
        if not self.devices:
            raise ConfigError("A build needs at least one device.")

    @classmethod
    def from_upload(cls, upload: UploadResult, config: RunConfig) -> "BuildRequest":
        return cls(
            app_url=upload.app_url,
            test_suite_url=upload.test_suite_url,
            devices=tuple(config.devices),
            device_logs=config.device_logs,
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "app": self.app_url,
            "testSuite": self.test_suite_url,
            "devices": list(self.devices),
            "deviceLogs": self.device_logs,
        }


class BuildOutcome(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
