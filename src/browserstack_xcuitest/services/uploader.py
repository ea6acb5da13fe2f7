"""Concurrent upload of the app binary and the XCUITest package."""

import concurrent.futures

from browserstack_xcuitest.constants import (
    APP_UPLOAD_PATH,
    APP_URL_FIELD,
    TEST_SUITE_UPLOAD_PATH,
    TEST_URL_FIELD,
)
from browserstack_xcuitest.models import UploadResult
from browserstack_xcuitest.services.http_client import require_string_field


class ArtifactUploader:
    """Uploads both artifacts in parallel and waits for both to finish."""

    def __init__(self, api_client, encoder, logger, console):
        self.api_client = api_client
        self.encoder = encoder
        self.logger = logger
        self.console = console

    def upload_artifact(self, path: str, endpoint: str, field: str, label: str) -> str:
        self.logger.info("Uploading %s: %s", label, path)
        encoded = self.encoder.encode_file(path)
        response = self.api_client.post(endpoint, encoded.body, encoded.content_type)
        locator = require_string_field(response, field, self.api_client.url_for(endpoint))
        self.console.print(f"[green]Uploaded {label}:[/green] {locator}")
        return locator

    def upload_all(self, app_path: str, test_suite_path: str) -> UploadResult:
        self.console.print("[blue]Uploading app and test suite...[/blue]")

        with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
            app_task = executor.submit(
                self.upload_artifact, app_path, APP_UPLOAD_PATH, APP_URL_FIELD, "app"
            )
            test_suite_task = executor.submit(
                self.upload_artifact,
                test_suite_path,
                TEST_SUITE_UPLOAD_PATH,
                TEST_URL_FIELD,
                "test suite",
            )
            # Join on both even when one has already failed.
            concurrent.futures.wait([app_task, test_suite_task])

        app_error = app_task.exception()
        test_suite_error = test_suite_task.exception()

        if app_error is not None and test_suite_error is not None:
            self.logger.error("Test suite upload also failed: %s", test_suite_error)
        if app_error is not None:
            raise app_error
        if test_suite_error is not None:
            raise test_suite_error

        return UploadResult(app_url=app_task.result(), test_suite_url=test_suite_task.result())
