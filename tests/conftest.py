import logging
import pytest
from jsdoc_core import logger


@pytest.fixture(autouse=True)
def detach_file_handlers():
    """Keep log files opened by one test from receiving records of the next."""
    yield
    jsdoc_logger = logger.get_logger()
    for handler in list(jsdoc_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            jsdoc_logger.removeHandler(handler)
            handler.close()
