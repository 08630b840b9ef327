"""Shared test fixtures."""

import logging

import numpy as np
import pytest


@pytest.fixture
def flat5():
    """Uniform 5x5 grid: every neighbour matches the center."""
    return np.full((5, 5), 100, dtype=np.uint8)


@pytest.fixture
def code170():
    """3x3 grid whose only interior pixel has code 0b10101010."""
    img = np.full((3, 3), 10, dtype=np.uint8)
    img[1, 1] = 50
    img[0, 1] = 50  # top, 2
    img[1, 2] = 60  # right, 8
    img[2, 1] = 200  # bottom, 32
    img[1, 0] = 255  # left, 128
    return img


@pytest.fixture
def noise():
    """Random 8-bit grid."""
    return np.random.RandomState(42).randint(0, 256, (37, 23)).astype(np.uint8)


@pytest.fixture
def root_logger():
    """Root logger, with its handlers and level restored afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
