import logging

import pytest

from py_angle.logger import logger
from py_angle.unit import PreferredUnits

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def default_preferred_units():
    PreferredUnits.restore_defaults()
    yield
    PreferredUnits.restore_defaults()
