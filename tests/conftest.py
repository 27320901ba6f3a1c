"""Shared fixtures for the Gilded Rose test suite."""

import logging

import pytest

from gilded_rose import Item


@pytest.fixture
def backstage_items():
    name = "Backstage passes to a TAFKAL80ETC concert"
    return [
        Item(name, 15, 0),
        Item(name, 10, 0),
        Item(name, 5, 0),
        Item(name, 0, 50),
    ]


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """Drop handlers the runner attaches so each test gets fresh streams."""
    yield
    logger = logging.getLogger('gilded_rose')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
