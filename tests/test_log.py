# tests/test_log.py

import logging

import pytest
from rich.logging import RichHandler

from sic2lp.common.log import setup_logging


@pytest.mark.parametrize("verbosity, quiet, level", [
    (0, False, logging.INFO),
    (1, False, logging.DEBUG),
    (2, False, logging.DEBUG),
    (0, True, logging.WARNING),
    (2, True, logging.WARNING),  # quiet wins over -v
])
def test_setup_logging_levels(verbosity, quiet, level):
    setup_logging(verbosity, quiet)
    assert logging.getLogger("sic2lp").level == level


def test_repeated_setup_keeps_a_single_handler():
    setup_logging(0)
    setup_logging(2)
    setup_logging(2, quiet=True)

    handlers = logging.getLogger("sic2lp").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
