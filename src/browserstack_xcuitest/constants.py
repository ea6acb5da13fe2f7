"""Fixed values of the BrowserStack App Automate XCUITest contract."""

DEFAULT_API_URL = "https://api-cloud.browserstack.com"
DASHBOARD_BUILD_URL = "https://app-automate.browserstack.com/builds/{build_id}"

APP_UPLOAD_PATH = "/app-automate/upload"
TEST_SUITE_UPLOAD_PATH = "/app-automate/xcuitest/test-suite"
BUILD_PATH = "/app-automate/xcuitest/build"
BUILD_STATUS_PATH = "/app-automate/xcuitest/builds/{build_id}"

APP_URL_FIELD = "app_url"
TEST_URL_FIELD = "test_url"
BUILD_ID_FIELD = "build_id"
STATUS_FIELD = "status"

STATUS_RUNNING = "running"
STATUS_DONE = "done"
STATUS_FAILED = "failed"

MULTIPART_FIELD_NAME = "file"
JSON_CONTENT_TYPE = "application/json"

DEFAULT_DEVICES = ("iPhone XS-12",)
DEFAULT_POLL_INTERVAL = 30.0
# Seconds per socket operation, not per request.
REQUEST_TIMEOUT = 300.0

DEFAULT_OUTPUT_KEY = "BROWSERSTACK_BUILD_ID"
PUBLISH_COMMAND = ("bitrise", "envman", "add")
PUBLISH_TIMEOUT = 60.0

DEFAULT_CONFIG_FILE = ".browserstack-xcuitest.yml"
