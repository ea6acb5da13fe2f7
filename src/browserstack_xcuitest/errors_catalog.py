"""Actionable error catalog for browserstack-xcuitest."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "missing_input": {
        "what": "Missing required input: {names}.",
        "next": "Set the environment variables, pass the CLI options, or add them to the config file.",
    },
    "network_failure": {
        "what": "{method} {url} failed before a response was received: {cause}",
        "next": "Check network connectivity and the `api_url` setting.",
    },
    "invalid_json": {
        "what": "{method} {url} returned a body that is not a JSON object (HTTP {status_code}): {cause}",
        "next": "Inspect the response in the verbose log; the service may be degraded.",
    },
    "remote_status": {
        "what": "HTTP status code {status_code} not in the 2xx range for {method} {url}. Response: {body}",
        "next": "Check the BrowserStack credentials and the uploaded artifacts.",
    },
    "missing_field": {
        "what": "Key {field} not found in response from {url}.",
        "next": "Inspect the response in the verbose log; the API contract may have changed.",
    },
    "file_unreadable": {
        "what": "Cannot read artifact {path}: {cause}",
        "next": "Check that the build step produced the file and that the path is correct.",
    },
    "unsupported_status": {
        "what": "Unsupported status value {status} found for build {build_id}.",
        "next": "Open the build on the BrowserStack dashboard to check its state.",
    },
    "publish_failed": {
        "what": "Failed to expose {key} to the pipeline: {cause}",
        "next": "Make sure `bitrise envman` is available on the PATH of this step.",
    },
    "insecure_http": {
        "what": "API URL {url} uses insecure HTTP.",
        "next": "Switch to HTTPS or set `allow_insecure_http` only for trusted endpoints.",
    },
}


def actionable_error(code: str, **kwargs) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
