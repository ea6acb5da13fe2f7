import pytest

from browserstack_xcuitest.errors import ConfigError, FileReadError
from browserstack_xcuitest.models import Credentials, RunConfig
from browserstack_xcuitest.services.validation import ValidationService


class DummyLogger:
    def __init__(self):
        self.warnings = []

    def warning(self, *args, **_kwargs):
        self.warnings.append(args)


class DummyConsole:
    def print(self, *_args, **_kwargs):
        return None


def _config(tmp_path, **overrides):
    app = tmp_path / "App.ipa"
    app.write_bytes(b"ipa")
    suite = tmp_path / "UITests.zip"
    suite.write_bytes(b"zip")
    values = {
        "credentials": Credentials("user", "secret"),
        "app_path": str(app),
        "test_suite_path": str(suite),
    }
    values.update(overrides)
    return RunConfig(**values)


def test_validate_inputs_accepts_https_and_existing_files(tmp_path):
    ValidationService().validate_inputs(_config(tmp_path), DummyLogger(), DummyConsole())


def test_http_api_url_is_blocked_by_default(tmp_path):
    config = _config(tmp_path, api_url="http://localhost:8080")

    with pytest.raises(ConfigError, match="insecure HTTP"):
        ValidationService().validate_inputs(config, DummyLogger(), DummyConsole())


def test_http_api_url_allowed_with_warning(tmp_path):
    logger = DummyLogger()
    config = _config(tmp_path, api_url="http://localhost:8080")

    ValidationService(allow_insecure_http=True).validate_inputs(config, logger, DummyConsole())

    assert logger.warnings


def test_non_http_api_url_is_rejected(tmp_path):
    config = _config(tmp_path, api_url="ftp://example.com")

    with pytest.raises(ConfigError, match="http"):
        ValidationService().validate_inputs(config, DummyLogger(), DummyConsole())


def test_missing_artifact_raises_file_read_error(tmp_path):
    config = _config(tmp_path, test_suite_path=str(tmp_path / "missing.zip"))

    with pytest.raises(FileReadError) as exc_info:
        ValidationService().validate_inputs(config, DummyLogger(), DummyConsole())

    assert exc_info.value.path.endswith("missing.zip")


def test_directory_artifact_is_rejected(tmp_path):
    config = _config(tmp_path, app_path=str(tmp_path))

    with pytest.raises(FileReadError, match="not a regular file"):
        ValidationService().validate_inputs(config, DummyLogger(), DummyConsole())
