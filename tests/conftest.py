"""Shared fixtures for the hand ranking test suite."""

import os
import sys

import pytest
from loguru import logger

# Add the parent directory to the path so we can import hand_ranking
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hand_ranking import Hand


@pytest.fixture(autouse=True)
def reset_loguru():
    """Undo sinks added by setup_logging so they don't outlive captured streams."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("hand_ranking")


@pytest.fixture
def make_hand():
    return Hand.from_string
