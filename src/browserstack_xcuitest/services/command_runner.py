"""Subprocess execution service for browserstack-xcuitest."""

import subprocess
from typing import List, Optional

from browserstack_xcuitest.errors import RunnerError


class CommandRunner:
    """Runs external commands with consistent error handling."""

    def __init__(self, logger):
        self.logger = logger

    def run(
        self,
        cmd: List[str],
        check: bool = True,
        capture_output: bool = False,
        timeout: Optional[float] = None,
    ) -> subprocess.CompletedProcess:
        cmd_str = " ".join(cmd)
        self.logger.debug("Executing: %s", cmd_str)

        try:
            result = subprocess.run(
                cmd,
                text=True,
                capture_output=capture_output,
                timeout=timeout,
            )
        except FileNotFoundError as exc:
            raise RunnerError(
                f"Required command not found: {cmd[0]}. Please install it and try again."
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise RunnerError(f"Command timed out after {timeout}s: {cmd_str}") from exc
        except OSError as exc:
            raise RunnerError(f"Failed to execute command: {cmd_str}. {exc}") from exc

        if capture_output and result.stdout:
            self.logger.debug("Command output: %s", result.stdout.strip())

        if result.returncode == 0:
            return result

        output = ""
        if capture_output:
            output = "\n".join(part.strip() for part in (result.stdout, result.stderr) if part)
        message = f"Command failed ({result.returncode}): {cmd_str}"
        if output:
            message = f"{message}\n{output}"

        if check:
            raise RunnerError(message)

        self.logger.warning(message)
        return result
