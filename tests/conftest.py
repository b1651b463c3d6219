import logging

import pytest


@pytest.fixture(autouse=True)
def reset_spgen_logger():
    """The CLI binds a handler to the captured stderr; drop it after each test."""
    yield
    logger = logging.getLogger("spgen")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
