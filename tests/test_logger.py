import io
import logging

import pytest

from utils.logger import configure_logging, get_logger


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_configure_logging_installs_one_handler(root_logger):
    first = configure_logging("INFO")
    second = configure_logging("WARNING")

    assert first is second
    assert root_logger.handlers.count(first) == 1
    assert root_logger.level == logging.WARNING


def test_get_logger_reuses_installed_handler(root_logger):
    handler = configure_logging("DEBUG")
    get_logger("repositories.property_repo")
    assert root_logger.handlers.count(handler) == 1


def test_configure_logging_uses_project_format(root_logger):
    handler = configure_logging("INFO")
    stream = io.StringIO()
    original = handler.setStream(stream)
    try:
        get_logger("repositories.user_repo").info("Added user #1")
    finally:
        handler.setStream(original)

    assert "| INFO     | repositories.user_repo | Added user #1" in stream.getvalue()


def test_configure_logging_rejects_unknown_level(root_logger):
    with pytest.raises(ValueError, match="Unknown log level: LOUD"):
        configure_logging("loud")
