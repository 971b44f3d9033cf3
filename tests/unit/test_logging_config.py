import logging
from contextlib import contextmanager

import pytest
from environs import Env

from measurement.logging_config import get_logger, setup_logging


@contextmanager
def bare_root_logger():
    """
    Run with no handlers on the root logger, as in a fresh process.

    pytest attaches its capture handlers for each test phase, so this has to
    be entered inside the test body. Handlers and levels are put back on exit.
    """
    package_logger = logging.getLogger("measurement")
    handlers = logging.root.handlers[:]
    root_level, package_level = logging.root.level, package_logger.level
    logging.root.handlers.clear()
    try:
        yield
    finally:
        logging.root.handlers[:] = handlers
        logging.root.setLevel(root_level)
        package_logger.setLevel(package_level)


def test_default_level_is_info(monkeypatch):
    monkeypatch.delenv("LOGGING_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    with bare_root_logger():
        setup_logging(Env())

        assert logging.getLogger("measurement").level == logging.INFO
        assert logging.root.level == logging.INFO


def test_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "warning")
    monkeypatch.delenv("DEBUG", raising=False)

    with bare_root_logger():
        setup_logging(Env())

        assert logging.getLogger("measurement").level == logging.WARNING


def test_debug_flag_overrides_level(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "ERROR")
    monkeypatch.setenv("DEBUG", "true")

    with bare_root_logger():
        setup_logging(Env())

        assert logging.getLogger("measurement").level == logging.DEBUG


def test_invalid_level_raises(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "LOUD")
    monkeypatch.delenv("DEBUG", raising=False)

    with bare_root_logger():
        with pytest.raises(ValueError, match="Invalid log level: LOUD"):
            setup_logging(Env())


def test_handler_writes_to_stdout(monkeypatch):
    monkeypatch.delenv("LOGGING_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    with bare_root_logger():
        setup_logging(Env())

        assert len(logging.root.handlers) == 1
        assert isinstance(logging.root.handlers[0], logging.StreamHandler)


def test_already_configured_logging_is_left_alone(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "LOUD")

    # pytest installs its own handlers on the root logger
    assert logging.root.handlers
    setup_logging(Env())


def test_get_logger():
    assert get_logger("measurement.domain").name == "measurement.domain"
