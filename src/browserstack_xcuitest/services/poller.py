"""Build status polling until a terminal state."""

import time

from browserstack_xcuitest.constants import (
    BUILD_STATUS_PATH,
    DEFAULT_POLL_INTERVAL,
    STATUS_DONE,
    STATUS_FAILED,
    STATUS_FIELD,
    STATUS_RUNNING,
)
from browserstack_xcuitest.errors import UnsupportedStatusError
from browserstack_xcuitest.models import BuildOutcome
from browserstack_xcuitest.services.http_client import require_string_field


class BuildPoller:
    """Polls the build status endpoint on a fixed interval.

    The interval elapses before every check, including the first one. There
    is no upper bound on the number of polls; only a terminal status or an
    error ends the loop.
    """

    def __init__(self, api_client, logger, console, poll_interval: float = DEFAULT_POLL_INTERVAL):
        self.api_client = api_client
        self.logger = logger
        self.console = console
        self.poll_interval = poll_interval
        self.poll_count = 0

    def check_status(self, build_id: str) -> str:
        path = BUILD_STATUS_PATH.format(build_id=build_id)
        response = self.api_client.get(path)
        self.poll_count += 1
        return require_string_field(response, STATUS_FIELD, self.api_client.url_for(path))

    def wait_for_completion(self, build_id: str) -> BuildOutcome:
        self.console.print(f"[yellow]Waiting for build {build_id} to finish...[/yellow]")

        while True:
            time.sleep(self.poll_interval)
            status = self.check_status(build_id)
            self.logger.info("Build %s status: %s", build_id, status)

            if status == STATUS_RUNNING:
                continue
            if status == STATUS_DONE:
                return BuildOutcome.SUCCEEDED
            if status == STATUS_FAILED:
                return BuildOutcome.FAILED
            raise UnsupportedStatusError(status, build_id)
