import logging

from clubpairing.utils import get_log_level, setup_logger


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("CLUBPAIRING_LOG_LEVEL", "debug")

    assert get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("CLUBPAIRING_LOG_LEVEL", "chatty")

    assert get_log_level() == logging.WARNING


def test_setup_logger_returns_child_of_package_logger():
    logger = setup_logger("clubpairing.some_module")

    assert logger.name == "clubpairing.some_module"
    assert logging.getLogger("clubpairing").handlers
