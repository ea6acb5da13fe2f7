"""Exposes the build identifier to the surrounding Bitrise pipeline."""

from typing import Sequence

from browserstack_xcuitest.constants import PUBLISH_COMMAND, PUBLISH_TIMEOUT
from browserstack_xcuitest.errors import PublishError, RunnerError


class OutputPublisher:
    """Publishes a key/value pair through `envman`."""

    def __init__(
        self,
        command_runner,
        logger,
        key: str,
        command: Sequence[str] = PUBLISH_COMMAND,
    ):
        self.command_runner = command_runner
        self.logger = logger
        self.key = key
        self.command = tuple(command)

    def build_command(self, value: str):
        return list(self.command) + ["--key", self.key, "--value", value]

    def publish(self, value: str):
        self.logger.info("Exposing %s=%s", self.key, value)
        try:
            self.command_runner.run(
                self.build_command(value),
                check=True,
                capture_output=True,
                timeout=PUBLISH_TIMEOUT,
            )
        except RunnerError as exc:
            raise PublishError(self.key, exc) from exc
