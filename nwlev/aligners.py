"""
aligners.py — User-facing presets for the nwlev DP core

Each preset builds a CostModel for a well-known scoring scheme and wraps
it, together with the two sequences, in an AlignmentEngine:

  - classic_edit_distance   : weighted Levenshtein distance (minimize).
  - global_alignment        : Needleman-Wunsch score with a linear gap
                              penalty (maximize).
  - clamped_local_alignment : zero boundary, scores floored at zero
                              (maximize, border 0).

The *_score / edit_distance helpers construct and compute in one call.
traceback() reconstructs one optimal alignment from the edit flags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Sequence, Tuple

from . import default
from .dp_core import AlignmentEngine, CostModel, Edit, Goal

logger = logging.getLogger(__name__)

ScoreFunc = Callable[[Hashable, Hashable], int]


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

def classic_edit_distance(seq_a: Sequence, seq_b: Sequence) -> AlignmentEngine:
    """
    Classic edit distance: D(i,0) = i, D(0,j) = j, unit insertion and
    deletion, substitution 0 on match and 2 on mismatch, minimized.
    """
    return AlignmentEngine(seq_a, seq_b, CostModel(goal=Goal.MINIMIZE))


def global_alignment(
    seq_a: Sequence,
    seq_b: Sequence,
    gap_cost: int = default.GAP_COST,
    substitution_score: Optional[ScoreFunc] = None,
) -> AlignmentEngine:
    """
    Needleman-Wunsch style global alignment with a linear gap penalty.

    Parameters
    ----------
    seq_a, seq_b : sequence
        Sequences to align.

    gap_cost : int
        Penalty per gap symbol (positive); every insertion and deletion
        scores -gap_cost and the boundary is seeded with -pos * gap_cost.

    substitution_score : callable (a, b) -> int, optional
        Score for aligning a with b.  Default: +1 match, -1 mismatch.

    Returns
    -------
    AlignmentEngine
        Engine with goal MAXIMIZE; compute() yields the alignment score.
    """
    model = CostModel(
        init_a=lambda symbol, position: -position * gap_cost,
        init_b=lambda symbol, position: -position * gap_cost,
        insertion_cost=lambda symbol: -gap_cost,
        deletion_cost=lambda symbol: -gap_cost,
        substitution_cost=substitution_score or default.match_mismatch_score,
        goal=Goal.MAXIMIZE,
    )
    return AlignmentEngine(seq_a, seq_b, model)


def clamped_local_alignment(
    seq_a: Sequence,
    seq_b: Sequence,
    gap_cost: int = default.GAP_COST,
    substitution_score: Optional[ScoreFunc] = None,
) -> AlignmentEngine:
    """
    Alignment with free prefixes and scores floored at zero.

    The boundary is seeded with 0, gaps score -gap_cost and every cell is
    clamped to be >= 0 (border_cost = 0, maximize), so a poorly matching
    prefix never drags the score below zero.
    """
    model = CostModel(
        init_a=lambda symbol, position: 0,
        init_b=lambda symbol, position: 0,
        insertion_cost=lambda symbol: -gap_cost,
        deletion_cost=lambda symbol: -gap_cost,
        substitution_cost=substitution_score or default.match_mismatch_score,
        border_cost=0,
        goal=Goal.MAXIMIZE,
    )
    return AlignmentEngine(seq_a, seq_b, model)


def edit_distance(seq_a: Sequence, seq_b: Sequence, **model_kwargs) -> int:
    """
    Create an engine and return D(n, m) in one call.

    Keyword arguments are forwarded to CostModel, e.g.
    edit_distance("kitten", "sitting", substitution_cost=lambda a, b: int(a != b)).
    """
    engine = AlignmentEngine(seq_a, seq_b, CostModel(**model_kwargs))
    return engine.compute()


def global_alignment_score(
    seq_a: Sequence,
    seq_b: Sequence,
    gap_cost: int = default.GAP_COST,
    substitution_score: Optional[ScoreFunc] = None,
) -> int:
    """Global alignment score S(A, B); see global_alignment."""
    return global_alignment(seq_a, seq_b, gap_cost, substitution_score).compute()


# ---------------------------------------------------------------------------
# Traceback
# ---------------------------------------------------------------------------

@dataclass
class Traceback:
    """
    One optimal alignment recovered from the edit matrix.

    Attributes
    ----------
    score : int
        D(i, j) at the cell the traceback started from.

    aligned_a, aligned_b : str
        Aligned prefixes A[:i] and B[:j] with '-' for gaps, one str(symbol)
        per column.  Meant for single-character symbols; token sequences
        should use symbols_a / symbols_b.

    path : list of (i, j)
        DP cells from (0, 0) to the start cell.

    operations : str
        One character per alignment column: 'M' (substitution or match),
        'D' (deletion from A), 'I' (insertion of B).

    symbols_a, symbols_b : list
        The aligned symbols themselves, one per column, None for a gap.
    """
    score: int
    aligned_a: str
    aligned_b: str
    path: List[Tuple[int, int]]
    operations: str
    symbols_a: List[Optional[Hashable]]
    symbols_b: List[Optional[Hashable]]


def traceback(
    engine: AlignmentEngine,
    i: Optional[int] = None,
    j: Optional[int] = None,
    gap: str = "-",
) -> Traceback:
    """
    Reconstruct one optimal alignment ending at (i, j) (default (n, m)).

    Tied cells are resolved in the order SUBSTITUTION, DELETION,
    INSERTION.  On the boundary, column 0 is walked with deletions and
    row 0 with insertions.
    """
    if i is None:
        i = engine.n
    if j is None:
        j = engine.m
    score = engine.compute(i, j)

    seq_a, seq_b = engine.seq_a, engine.seq_b
    sym_a: List[Optional[Hashable]] = []
    sym_b: List[Optional[Hashable]] = []
    ops: List[str] = []
    path: List[Tuple[int, int]] = []

    while i > 0 or j > 0:
        path.append((i, j))
        flags = engine.edit_at(i, j)
        if j == 0:
            move = Edit.DELETION
        elif i == 0:
            move = Edit.INSERTION
        elif flags & Edit.SUBSTITUTION:
            move = Edit.SUBSTITUTION
        elif flags & Edit.DELETION:
            move = Edit.DELETION
        else:
            move = Edit.INSERTION

        if move is Edit.SUBSTITUTION:
            sym_a.append(seq_a[i - 1])
            sym_b.append(seq_b[j - 1])
            ops.append("M")
            i -= 1
            j -= 1
        elif move is Edit.DELETION:
            sym_a.append(seq_a[i - 1])
            sym_b.append(None)
            ops.append("D")
            i -= 1
        else:
            sym_a.append(None)
            sym_b.append(seq_b[j - 1])
            ops.append("I")
            j -= 1
    path.append((0, 0))
    path.reverse()
    sym_a.reverse()
    sym_b.reverse()

    logger.debug("traceback: %d columns, score %d", len(ops), score)
    return Traceback(
        score=score,
        aligned_a="".join(gap if s is None else str(s) for s in sym_a),
        aligned_b="".join(gap if s is None else str(s) for s in sym_b),
        path=path,
        operations="".join(reversed(ops)),
        symbols_a=sym_a,
        symbols_b=sym_b,
    )
