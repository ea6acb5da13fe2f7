"""Pre-flight input checks for browserstack-xcuitest."""

from pathlib import Path
from urllib.parse import urlparse

from browserstack_xcuitest.errors import ConfigError, FileReadError
from browserstack_xcuitest.errors_catalog import actionable_error


class ValidationService:
    """Validates the API endpoint and local artifacts before any network call."""

    def __init__(self, allow_insecure_http: bool = False):
        self.allow_insecure_http = allow_insecure_http

    def is_url(self, location: str) -> bool:
        scheme = urlparse(location).scheme.lower()
        return scheme in {"http", "https"}

    def enforce_https_policy(self, location: str, logger, console):
        if not self.is_url(location):
            raise ConfigError(f"API URL must be an http(s) URL: {location}")

        scheme = urlparse(location).scheme.lower()
        if scheme == "http" and not self.allow_insecure_http:
            raise ConfigError(actionable_error("insecure_http", url=location))

        if scheme == "http" and self.allow_insecure_http:
            logger.warning("Insecure HTTP enabled for API URL: %s", location)
            console.print(
                "[yellow]Warning:[/yellow] Credentials will be sent over insecure HTTP. "
                "Prefer HTTPS whenever possible."
            )

    def ensure_artifact(self, path: str):
        artifact = Path(path)
        if not artifact.exists():
            raise FileReadError(path, "file does not exist")
        if not artifact.is_file():
            raise FileReadError(path, "not a regular file")

    def validate_inputs(self, config, logger, console):
        self.enforce_https_policy(config.api_url, logger, console)
        self.ensure_artifact(config.app_path)
        self.ensure_artifact(config.test_suite_path)
