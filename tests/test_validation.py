"""
test_validation.py — Engine vs independent bottom-up baselines

Verifies that the on-demand engine agrees with plain Levenshtein and
Needleman-Wunsch implementations on fixed and random inputs.
"""

import pytest

from nwlev.dp_core import AlignmentEngine, CostModel
from nwlev.validation import (
    check_alignment_vs_reference,
    check_engine_vs_reference,
    levenshtein_reference,
    needleman_wunsch_reference,
)


class TestReferences:
    """Sanity checks of the baselines themselves."""

    @pytest.mark.parametrize("A,B,expected", [
        ("", "", 0),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
    ])
    def test_textbook_levenshtein(self, A, B, expected, unit_substitution):
        assert levenshtein_reference(A, B, substitution=unit_substitution) == expected

    def test_intention_execution_weighted(self):
        # Jurafsky & Martin: substitution cost 2 gives 8
        assert levenshtein_reference("intention", "execution") == 8

    def test_needleman_wunsch(self):
        assert needleman_wunsch_reference("ATC", "AATC", gap_cost=1, match=0, mismatch=-2) == -1
        assert needleman_wunsch_reference("", "AAA", gap_cost=2) == -6


class TestEngineVsReference:
    """The engine matches the baselines."""

    FIXED_CASES = [
        ("INTENTION", "EXECUTION"),
        ("bane", "barn"),
        ("vase", "cave"),
        ("comb", "love"),
        ("bike", "back"),
        ("", "abc"),
        ("abc", ""),
    ]

    @pytest.mark.parametrize("A,B", FIXED_CASES)
    def test_fixed_cases(self, A, B):
        engine_value, reference_value = check_engine_vs_reference(A, B)
        assert engine_value == reference_value

    def test_random_words(self, rng, random_word_factory):
        for length in [5, 10, 20, 40]:
            A = random_word_factory(length, rng)
            B = random_word_factory(length, rng)
            engine_value, reference_value = check_engine_vs_reference(A, B)
            assert engine_value == reference_value, f"Mismatch on random len={length}"

    def test_random_asymmetric(self, rng_alt, random_word_factory):
        for nA, nB in [(10, 20), (30, 15), (5, 50)]:
            A = random_word_factory(nA, rng_alt)
            B = random_word_factory(nB, rng_alt)
            engine_value, reference_value = check_engine_vs_reference(A, B)
            assert engine_value == reference_value, f"Mismatch on nA={nA}, nB={nB}"

    def test_weighted_gaps(self, rng, random_word_factory):
        for _ in range(10):
            A = random_word_factory(12, rng)
            B = random_word_factory(9, rng)
            model = CostModel(
                init_a=lambda c, p: 3 * p,
                init_b=lambda c, p: 2 * p,
                deletion_cost=lambda c: 3,
                insertion_cost=lambda c: 2,
            )
            expected = levenshtein_reference(A, B, insertion=2, deletion=3)
            assert AlignmentEngine(A, B, model).compute() == expected

    SCORING_VARIANTS = [
        ("default", 1, 1, -1),
        ("heavy_gaps", 4, 1, -1),
        ("harsh_mismatch", 1, 2, -3),
    ]

    @pytest.mark.parametrize("name,gap_cost,match,mismatch", SCORING_VARIANTS)
    def test_global_alignment_variants(self, name, gap_cost, match, mismatch,
                                       rng, dna_bases, random_word_factory):
        for _ in range(10):
            A = random_word_factory(15, rng, dna_bases)
            B = random_word_factory(12, rng, dna_bases)
            engine_value, reference_value = check_alignment_vs_reference(
                A, B, gap_cost=gap_cost, match=match, mismatch=mismatch,
            )
            assert engine_value == reference_value, f"Mismatch under {name} scoring"
