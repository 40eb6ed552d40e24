import logging

import pytest

from blend_estimates.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_blend_estimates_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
