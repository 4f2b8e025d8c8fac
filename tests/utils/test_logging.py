import logging

from blazenaming.utils.logging import LOGGER_NAME, configure_logging, get_logger


def test_logger_namespace():
    assert get_logger("strategies").name == "blazenaming.strategies"


def test_get_logger_does_not_attach_handlers():
    get_logger("tests.logging")
    assert not logging.getLogger("blazenaming.tests.logging").handlers


def test_configure_logging_is_idempotent():
    logger = configure_logging(logging.DEBUG)
    configure_logging(logging.DEBUG)
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging()
    assert logger.level == logging.INFO
