# tests/test_logger.py
import logging

from endless_translating.utils.logger import PACKAGE_LOGGER, _resolve_level, get_logger


def test_module_loggers_are_package_children():
    assert get_logger("endless_translating.corpus.store").name == "endless_translating.corpus.store"
    assert get_logger("scratch").name == "endless_translating.scratch"


def test_single_package_handler_across_calls():
    for _ in range(3):
        get_logger("endless_translating.session.controller")
    assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1


def test_level_names():
    assert _resolve_level("debug") == logging.DEBUG
    assert _resolve_level(None) == logging.INFO
    assert _resolve_level("loud") == logging.INFO
