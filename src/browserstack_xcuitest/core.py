import logging
from typing import Optional

import requests
from rich.console import Console
from rich.markup import escape

from .constants import (
    APP_UPLOAD_PATH,
    BUILD_PATH,
    BUILD_STATUS_PATH,
    DASHBOARD_BUILD_URL,
    TEST_SUITE_UPLOAD_PATH,
)
from .errors import RunnerError
from .models import BuildOutcome, BuildRequest, RunConfig, UploadResult
from .services.build import BuildTrigger
from .services.command_runner import CommandRunner
from .services.http_client import ApiClient
from .services.multipart import MultipartEncoder
from .services.poller import BuildPoller
from .services.publisher import OutputPublisher
from .services.uploader import ArtifactUploader
from .services.validation import ValidationService

console = Console()
logger = logging.getLogger("browserstack_xcuitest")


class XCUITestRunner:
    """Uploads artifacts, triggers an XCUITest build and waits for its outcome."""

    def __init__(self, config: RunConfig):
        self.config = config
        self.build_id: Optional[str] = None

        self.validation_service = ValidationService(
            allow_insecure_http=config.allow_insecure_http,
        )
        self.api_client = ApiClient(
            base_url=config.api_url,
            credentials=config.credentials,
            logger=logger,
            requests_module=requests,
        )
        self.uploader = ArtifactUploader(
            api_client=self.api_client,
            encoder=MultipartEncoder(),
            logger=logger,
            console=console,
        )
        self.build_trigger = BuildTrigger(api_client=self.api_client, logger=logger)
        self.poller = BuildPoller(
            api_client=self.api_client,
            logger=logger,
            console=console,
            poll_interval=config.poll_interval,
        )
        self.publisher = OutputPublisher(
            command_runner=CommandRunner(logger=logger),
            logger=logger,
            key=config.output_key,
        )

    def validate_inputs(self):
        console.print("[blue]Validating inputs...[/blue]")
        logger.info("IPA path: %s", self.config.app_path)
        logger.info("XCUITest package path: %s", self.config.test_suite_path)
        self.validation_service.validate_inputs(self.config, logger, console)

    def print_plan(self):
        console.print("[bold]Dry run: no request will be sent.[/bold]")
        for label, method, path in (
            ("Upload app", "POST", APP_UPLOAD_PATH),
            ("Upload test suite", "POST", TEST_SUITE_UPLOAD_PATH),
            ("Trigger build", "POST", BUILD_PATH),
            ("Poll status", "GET", BUILD_STATUS_PATH),
        ):
            console.print(f"  {label}: {method} {self.api_client.url_for(path)}")
        console.print(f"  Devices: {', '.join(self.config.devices)}")
        console.print(f"  Device logs: {self.config.device_logs}")
        console.print(f"  Poll interval: {self.config.poll_interval:g}s")
        console.print(f"  Output key: {self.config.output_key}")

    def upload_artifacts(self) -> UploadResult:
        return self.uploader.upload_all(self.config.app_path, self.config.test_suite_path)

    def trigger_build(self, upload: UploadResult) -> str:
        build_request = BuildRequest.from_upload(upload, self.config)
        build_id = self.build_trigger.trigger(build_request)
        dashboard_url = DASHBOARD_BUILD_URL.format(build_id=build_id)
        logger.info(dashboard_url)
        console.print(f"[bold blue]Build started:[/bold blue] {dashboard_url}")
        return build_id

    def run(self) -> int:
        try:
            logger.info("Starting browserstack-xcuitest...")
            self.validate_inputs()

            if self.config.dry_run:
                self.print_plan()
                return 0

            upload = self.upload_artifacts()
            self.build_id = self.trigger_build(upload)
            outcome = self.poller.wait_for_completion(self.build_id)
            self.publisher.publish(self.build_id)

            if outcome is BuildOutcome.SUCCEEDED:
                console.print("[bold green]Build succeeded.[/bold green]")
                logger.info("Build %s succeeded", self.build_id)
                return 0

            console.print("[bold red]Build failed.[/bold red]")
            logger.error("Build %s failed", self.build_id)
            return 1

        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except RunnerError as exc:
            console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
            logger.error(str(exc))
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(exc))}")
            logger.exception("Unexpected error")
            return 1
