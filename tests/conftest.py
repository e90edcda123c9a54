import numpy as np
import pytest

from intmatrix import Matrix


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_matrix(rng):
    def make(rows, cols=None):
        m = Matrix(rows, rows if cols is None else cols)
        m.fill_random(rng)
        return m
    return make
