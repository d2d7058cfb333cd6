import random

import pytest


@pytest.fixture
def rng () -> random.Random:

	"""Return a seeded random number generator for repeatable tests."""

	return random.Random(42)
