"""Shared fixtures for the bitga test-suite"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from bitga.genetic import NUM_GENES

# 2^2 + 17^2 + 28^2 + 30^2 == 1977
PERFECT_POSITIONS = (1, 16, 27, 29)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def perfect_genome():
    genome = np.zeros(NUM_GENES, dtype=np.int64)
    genome[list(PERFECT_POSITIONS)] = 1
    return genome


@pytest.fixture
def zeros():
    return np.zeros(NUM_GENES, dtype=np.int64)


@pytest.fixture
def ones():
    return np.ones(NUM_GENES, dtype=np.int64)
