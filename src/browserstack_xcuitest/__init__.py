"""
browserstack-xcuitest - run XCUITest suites on BrowserStack App Automate from CI
"""

__version__ = "0.1.0"

from .core import XCUITestRunner
from .errors import RunnerError

__all__ = ["XCUITestRunner", "RunnerError"]
