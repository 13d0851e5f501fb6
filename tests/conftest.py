# tests/conftest.py

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def random_signal():
    """Real white-noise input of 100 samples."""
    rng = np.random.default_rng(42)
    return rng.standard_normal(100).astype(np.float64, copy=False)


@pytest.fixture
def complex_signal():
    rng = np.random.default_rng(42)
    n_samples = 64
    x = (rng.standard_normal(n_samples) + 1j * rng.standard_normal(n_samples)) / np.sqrt(2.0)
    return x.astype(np.complex128, copy=False)


@pytest.fixture
def butterworth_system():
    """3rd-order low-pass coefficients (b, a) with a[0] == 1."""
    return {
        "b": np.array(
            [0.009856381838533497, 0.02956914551560049, 0.02956914551560049, 0.009856381838533497],
            dtype=float,
        ),
        "a": np.array(
            [1.0, -2.2253012610556193, 1.955403057140463, -0.6512507413765761],
            dtype=float,
        ),
        "x": np.array([0.96, -0.08, 0.39, -0.39, -0.13, 0.41, 0.14, 0.9, -0.14, 1.0, -0.62]),
    }


@pytest.fixture
def unnormalized_system():
    """Coefficients with a[0] == 2 and their normalized counterparts."""
    return {
        "b": [0.5, 1, 0, -0.5],
        "a": [2.0, -1, 1],
        "b_norm": np.array([0.25, 0.5, 0.0, -0.25]),
        "a_norm": np.array([1.0, -0.5, 0.5]),
    }
