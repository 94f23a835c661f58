"""Pytest configuration and shared fixtures for proximal_optimize tests.

This module provides:
- A deterministic RNG fixture for numpy
- Log level reset so that verbose logging never leaks between tests
"""

import logging
import os

import numpy as np
import pytest

from proximal_optimize.logging import set_log_level


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_logging():
    """Restore the default WARNING level after every test."""
    yield
    set_log_level(logging.WARNING)
