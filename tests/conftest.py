import os
from collections import deque

import numpy as np
import pytest

from photoelectric.model.physics import evaluate

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeRandom:
    """
    Deterministic stand-in for numpy.random.Generator.

    random() pops queued values and then returns `default_random`.
    uniform(low, high) returns low + fraction * (high - low).
    """

    def __init__(self, randoms=(), default_random=1.0, fraction=0.5):
        self.randoms = deque(randoms)
        self.default_random = default_random
        self.fraction = fraction

    def random(self):
        if self.randoms:
            return self.randoms.popleft()
        return self.default_random

    def uniform(self, low, high):
        return low + self.fraction * (high - low)


@pytest.fixture
def fake_random():
    return FakeRandom


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def cesium_uv():
    """Cs at 10 x 10^14 Hz: Ep = 4.136 eV, Ec = 2.036 eV."""
    return evaluate(10.0, "Cs")


@pytest.fixture
def sodium_green():
    """Na at 6 x 10^14 Hz: below threshold."""
    return evaluate(6.0, "Na")


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
