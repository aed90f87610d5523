import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logger so later tests don't write to closed streams."""
    yield
    logger.remove()
