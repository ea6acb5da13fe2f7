"""Build submission for uploaded artifacts."""

import json

from browserstack_xcuitest.constants import BUILD_ID_FIELD, BUILD_PATH, JSON_CONTENT_TYPE
from browserstack_xcuitest.models import BuildRequest
from browserstack_xcuitest.services.http_client import require_string_field


class BuildTrigger:
    def __init__(self, api_client, logger):
        self.api_client = api_client
        self.logger = logger

    def trigger(self, build_request: BuildRequest) -> str:
        """Submit the build and return its identifier."""
        payload = json.dumps(build_request.to_payload()).encode("utf-8")
        self.logger.debug("Build request: %s", build_request.to_payload())

        response = self.api_client.post(BUILD_PATH, payload, JSON_CONTENT_TYPE)
        return require_string_field(response, BUILD_ID_FIELD, self.api_client.url_for(BUILD_PATH))
