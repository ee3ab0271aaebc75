import logging

import pytest


@pytest.fixture(autouse=True)
def reset_insights_logger():
    """setup_logger() engancha handlers a sys.stdout; se limpian entre tests"""
    yield
    logger = logging.getLogger("insights")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
