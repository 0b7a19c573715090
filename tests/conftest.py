"""
conftest.py — Shared pytest fixtures for the nwlev test suite

Provides alphabets, cost hooks and seeded random generators used across
all test modules.
"""

import pytest
import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
# Alphabet and cost fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def dna_bases() -> NDArray:
    """DNA alphabet."""
    return np.array(["A", "C", "G", "T"])


@pytest.fixture
def letters() -> NDArray:
    """Small Latin alphabet; small enough that random words share symbols."""
    return np.array(list("abcde"))


@pytest.fixture
def unit_substitution():
    """Substitution cost 0 on match, 1 on mismatch (textbook Levenshtein)."""
    return lambda a, b: 0 if a == b else 1


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def random_word_factory(letters):
    """Factory fixture returning a function to generate random words."""
    def _random_word(length: int, rng: np.random.Generator, alphabet=None) -> str:
        if alphabet is None:
            alphabet = letters
        return "".join(rng.choice(alphabet, size=length))
    return _random_word
