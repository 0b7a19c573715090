"""
validation.py — independent baselines for the nwlev DP core

Plain bottom-up implementations of weighted Levenshtein distance and
linear-gap Needleman-Wunsch, written directly against the textbook
recurrences and independent of dp_core, so that a bug in the engine
cannot be masked by the same bug in the baseline.
"""

from typing import Callable, Hashable, Optional, Sequence, Tuple

import numpy as np

from . import default
from .aligners import global_alignment
from .dp_core import AlignmentEngine, CostModel


def levenshtein_reference(
    a: Sequence,
    b: Sequence,
    insertion: int = default.INSERTION_COST,
    deletion: int = default.DELETION_COST,
    substitution: Optional[Callable[[Hashable, Hashable], int]] = None,
) -> int:
    """Weighted edit distance, constant gap costs."""
    if substitution is None:
        substitution = default.substitution_cost
    n, m = len(a), len(b)
    D = np.zeros((n + 1, m + 1), dtype=np.int64)
    D[:, 0] = np.arange(n + 1) * deletion
    D[0, :] = np.arange(m + 1) * insertion

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            D[i, j] = min(
                D[i - 1, j] + deletion,
                D[i, j - 1] + insertion,
                D[i - 1, j - 1] + substitution(a[i - 1], b[j - 1]),
            )
    return int(D[n, m])


def needleman_wunsch_reference(
    a: Sequence,
    b: Sequence,
    gap_cost: int = default.GAP_COST,
    match: int = default.MATCH_SCORE,
    mismatch: int = default.MISMATCH_SCORE,
) -> int:
    """Global alignment score with a linear gap penalty."""
    n, m = len(a), len(b)
    F = np.zeros((n + 1, m + 1), dtype=np.int64)
    F[:, 0] = -np.arange(n + 1) * gap_cost
    F[0, :] = -np.arange(m + 1) * gap_cost

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            diag = F[i - 1, j - 1] + (match if a[i - 1] == b[j - 1] else mismatch)
            up = F[i - 1, j] - gap_cost
            left = F[i, j - 1] - gap_cost
            F[i, j] = max(diag, up, left)
    return int(F[n, m])


def check_engine_vs_reference(a: Sequence, b: Sequence) -> Tuple[int, int]:
    """
    Return (engine distance, reference distance) under the classic
    edit distance defaults.
    """
    engine = AlignmentEngine(a, b, CostModel())
    return engine.compute(), levenshtein_reference(a, b)


def check_alignment_vs_reference(
    a: Sequence,
    b: Sequence,
    gap_cost: int = default.GAP_COST,
    match: int = default.MATCH_SCORE,
    mismatch: int = default.MISMATCH_SCORE,
) -> Tuple[int, int]:
    """Return (engine score, reference score) for global alignment."""
    engine = global_alignment(
        a, b, gap_cost=gap_cost,
        substitution_score=lambda x, y: match if x == y else mismatch,
    )
    return engine.compute(), needleman_wunsch_reference(a, b, gap_cost, match, mismatch)
