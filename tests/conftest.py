import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_sak_logger():
    yield
    sak_logger = logging.getLogger("sak")
    for handler in list(sak_logger.handlers):
        sak_logger.removeHandler(handler)
    sak_logger.setLevel(logging.NOTSET)
