"""
Pytest configuration for the webmate SDK test suite.

- All pytest options are defined HERE in conftest.py
- All fixtures are in fixtures.py (imported via "from fixtures import *")
- Test files only contain test functions and classes
"""

import pytest

from webmate.base.logger import Logger

# Import shared fixtures to make them available to all tests
from fixtures import *


def pytest_addoption(parser):
    """Add custom command line options"""

    parser.addoption(
        "--log-path", action="store", default=None,
        help="Directory for SDK log files (no file logging if omitted)"
    )
    parser.addoption(
        "--file-log-level", action="store", default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level"
    )
    parser.addoption(
        "--console-log-level", action="store", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level"
    )


@pytest.fixture(scope="session", autouse=True)
def setup_logger(request):
    """Initialize the SDK logger once per test session"""
    Logger.reset()
    logger = Logger.get_instance(
        log_path=request.config.getoption("--log-path"),
        file_level=request.config.getoption("--file-log-level"),
        console_level=request.config.getoption("--console-log-level")
    )
    yield logger
    Logger.reset()
