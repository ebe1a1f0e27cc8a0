"""Shared fixtures for polysecret tests."""

import random
import pytest
from polysecret.shares import SAMPLE_DOCUMENT


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_document():
    """The built-in n=4, k=3 example; its points lie on x^2 + 3."""
    return {key: dict(value) for key, value in SAMPLE_DOCUMENT.items()}


@pytest.fixture
def random_poly(rng):
    """Factory for random integer coefficient lists (lowest degree first)."""
    def make(degree, bound=10**30):
        coeffs = [rng.randint(-bound, bound) for _ in range(degree + 1)]
        if coeffs[-1] == 0:
            coeffs[-1] = 1
        return coeffs
    return make


@pytest.fixture
def int_eval():
    """Integer Horner evaluation, coefficients lowest degree first."""
    def evaluate(coeffs, x):
        result = 0
        for c in reversed(coeffs):
            result = result * x + c
        return result
    return evaluate
