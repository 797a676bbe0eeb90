"""Shared pytest fixtures"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers main() attached to the package logger during a test"""
    yield
    logger = logging.getLogger("random_words")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
