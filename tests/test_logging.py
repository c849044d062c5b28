import logging

from hhdocs.uploader.utils.logging import LOGGER_NAME, configure_logging, get_logger


def test_get_logger():
    assert get_logger().name == "hhdocs.uploader"
    assert get_logger("github").name == "hhdocs.uploader.github"
    assert get_logger("github").parent is logging.getLogger(LOGGER_NAME)


def test_configure_logging():
    logger = configure_logging("DEBUG")
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        # configuring again replaces the handler
        configure_logging("WARNING")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
