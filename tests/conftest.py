import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from coin_catch.config import get_config
from coin_catch.session import Session
from coin_catch.storage import MemoryStore


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def casual(store, rng):
    return Session(get_config("casual"), store=store, rng=rng)


@pytest.fixture
def leveled(store, rng):
    return Session(get_config("leveled"), store=store, rng=rng)
