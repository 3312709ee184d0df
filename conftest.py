import logging

import pytest

from src.utils.pontos_logger import BASE_NAME


@pytest.fixture
def pontos_caplog(caplog):
    """caplog that also sees the package logger (it does not propagate to root)."""
    logger = logging.getLogger(BASE_NAME)
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=BASE_NAME)
    yield caplog
    logger.removeHandler(caplog.handler)
