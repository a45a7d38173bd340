import logging

from iCrop.utils.console_logger import ensure_console_logger


def test_repeated_calls_reuse_one_handler_and_update_level():
    logger = logging.getLogger("iCrop.test.console")
    try:
        ensure_console_logger(logger, "test-console", level=logging.WARNING)
        ensure_console_logger(logger, "test-console", level=logging.DEBUG)

        named = [h for h in logger.handlers if h.name == "test-console"]
        assert len(named) == 1
        assert named[0].level == logging.DEBUG
        assert logger.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
