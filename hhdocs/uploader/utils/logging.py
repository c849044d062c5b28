# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

import logging


LOGGER_NAME = "hhdocs.uploader"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the hhdocs.uploader hierarchy."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Configure console output for the hhdocs.uploader logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # avoid duplicate output when configured more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
