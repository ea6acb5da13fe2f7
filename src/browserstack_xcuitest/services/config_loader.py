"""Configuration loading for browserstack-xcuitest."""

import math
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from browserstack_xcuitest.constants import (
    DEFAULT_API_URL,
    DEFAULT_DEVICES,
    DEFAULT_OUTPUT_KEY,
    DEFAULT_POLL_INTERVAL,
)
from browserstack_xcuitest.errors import ConfigError
from browserstack_xcuitest.models import Credentials, RunConfig

REQUIRED_INPUTS = {
    "username": "browserstack_username",
    "password": "browserstack_password",
    "app_path": "ipa_path",
    "test_suite_path": "xcuitest_package_path",
}


class ConfigLoader:
    """Loads YAML configuration files and assembles the run configuration."""

    SUPPORTED_KEYS = {
        "username",
        "password",
        "app_path",
        "test_suite_path",
        "devices",
        "device_logs",
        "poll_interval",
        "api_url",
        "allow_insecure_http",
        "output_key",
        "verbose",
        "log_file",
        "dry_run",
    }

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise ConfigError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfigError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise ConfigError(f"Unknown configuration keys: {unknown_list}")

        return parsed

    def build_run_config(self, values: Dict[str, Any]) -> RunConfig:
        """Validate resolved settings and freeze them into a RunConfig.

        Every missing required input is reported at once, named by its
        environment variable.
        """
        missing = [
            env_name
            for key, env_name in REQUIRED_INPUTS.items()
            if not str(values.get(key) or "").strip()
        ]
        if missing:
            raise ConfigError.for_missing(missing)

        devices = values.get("devices")
        if devices is None:
            devices = DEFAULT_DEVICES
        elif isinstance(devices, str):
            devices = [devices]
        elif not isinstance(devices, (list, tuple)) or any(
            isinstance(device, (list, tuple, dict)) for device in devices
        ):
            raise ConfigError("devices must be a device name or a list of device names.")
        devices = tuple(str(device).strip() for device in devices if str(device).strip())
        if not devices:
            raise ConfigError("At least one device must be configured.")

        raw_interval = _default(values.get("poll_interval"), DEFAULT_POLL_INTERVAL)
        if isinstance(raw_interval, bool):
            raise ConfigError("poll_interval must be a number.")
        try:
            poll_interval = float(raw_interval)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"poll_interval must be a number: {exc}") from exc
        if not (math.isfinite(poll_interval) and poll_interval > 0):
            raise ConfigError("poll_interval must be a finite number greater than zero.")

        return RunConfig(
            credentials=Credentials(
                username=str(values["username"]),
                password=str(values["password"]),
            ),
            app_path=str(values["app_path"]),
            test_suite_path=str(values["test_suite_path"]),
            devices=devices,
            device_logs=require_flag(values.get("device_logs"), "device_logs", True),
            poll_interval=poll_interval,
            api_url=str(values.get("api_url") or DEFAULT_API_URL),
            allow_insecure_http=require_flag(
                values.get("allow_insecure_http"), "allow_insecure_http", False
            ),
            output_key=str(values.get("output_key") or DEFAULT_OUTPUT_KEY),
            dry_run=require_flag(values.get("dry_run"), "dry_run", False),
            log_file=values.get("log_file"),
        )


def require_flag(value, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}.")
    return value


def _default(value, default):
    return default if value is None else value
