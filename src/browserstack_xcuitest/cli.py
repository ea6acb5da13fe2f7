import logging
import os

import click
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE
from .core import XCUITestRunner
from .errors import ConfigError
from .services.config_loader import ConfigLoader, require_flag


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option("--username", envvar="browserstack_username", help="BrowserStack username.")
@click.option(
    "--password",
    envvar="browserstack_password",
    help="BrowserStack access key. Prefer the environment variable.",
)
@click.option("--app-path", envvar="ipa_path", help="Path to the application .ipa file.")
@click.option(
    "--test-suite-path",
    envvar="xcuitest_package_path",
    help="Path to the zipped XCUITest runner package.",
)
@click.option(
    "--device",
    "devices",
    multiple=True,
    help="Device to run on, e.g. 'iPhone XS-12'. Repeat for several devices.",
)
@click.option(
    "--device-logs/--no-device-logs",
    default=None,
    help="Capture device logs during the build (default: enabled).",
)
@click.option(
    "--poll-interval",
    required=False,
    type=float,
    default=None,
    help="Seconds between build status checks (default: 30).",
)
@click.option("--api-url", required=False, help="BrowserStack API base URL.")
@click.option(
    "--allow-insecure-http",
    is_flag=True,
    default=None,
    help="Allow an HTTP API URL (insecure). By default only HTTPS is accepted.",
)
@click.option(
    "--output-key",
    required=False,
    help="Pipeline variable receiving the build id (default: BROWSERSTACK_BUILD_ID).",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
@click.option(
    "--dry-run",
    is_flag=True,
    default=None,
    help="Validate inputs and print the plan without contacting BrowserStack.",
)
def main(
    config,
    username,
    password,
    app_path,
    test_suite_path,
    devices,
    device_logs,
    poll_interval,
    api_url,
    allow_insecure_http,
    output_key,
    verbose,
    log_file,
    dry_run,
):
    """Run an XCUITest suite on BrowserStack App Automate and wait for the result."""
    logger = logging.getLogger("browserstack_xcuitest")

    config_loader = ConfigLoader()
    try:
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    values = {
        "username": _resolve_option(username, config_values, "username"),
        "password": _resolve_option(password, config_values, "password"),
        "app_path": _resolve_option(app_path, config_values, "app_path"),
        "test_suite_path": _resolve_option(test_suite_path, config_values, "test_suite_path"),
        "devices": _resolve_option(list(devices) or None, config_values, "devices"),
        "device_logs": _resolve_option(device_logs, config_values, "device_logs"),
        "poll_interval": _resolve_option(poll_interval, config_values, "poll_interval"),
        "api_url": _resolve_option(api_url, config_values, "api_url"),
        "allow_insecure_http": _resolve_option(
            allow_insecure_http, config_values, "allow_insecure_http"
        ),
        "output_key": _resolve_option(output_key, config_values, "output_key"),
        "log_file": _resolve_option(log_file, config_values, "log_file"),
        "dry_run": _resolve_option(dry_run, config_values, "dry_run"),
    }

    try:
        verbose = require_flag(_resolve_option(verbose, config_values, "verbose"), "verbose", False)
        run_config = config_loader.build_run_config(values)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if run_config.log_file:
        file_handler = logging.FileHandler(run_config.log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    runner = XCUITestRunner(run_config)
    raise SystemExit(runner.run())


if __name__ == "__main__":
    main()
