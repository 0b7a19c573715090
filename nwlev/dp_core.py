"""
dp_core.py — generalized edit distance / alignment dynamic programming core

This module implements a single-layer edit-distance DP parameterized by
pluggable boundary, insertion, deletion and substitution hooks and an
optimization goal.  The same recurrence gives classic (weighted)
Levenshtein distance under MINIMIZE and a Needleman-Wunsch global
alignment score with linear gaps under MAXIMIZE.

  - Edit           : per-cell flag set (BLOCKED, INSERTION, DELETION, SUBSTITUTION).
  - Goal           : MINIMIZE or MAXIMIZE.
  - CostModel      : immutable bundle of hooks, optional border clamp and goal.
  - AlignmentEngine: owns two sequences, a CostModel and the (n+1, m+1)
                     cost / edit matrices; cells are populated on demand.

Recurrence for an interior cell (i, j), a = A[i-1], b = B[j-1]:

    deletion     = D(i-1, j)   + deletion_cost(a)
    insertion    = D(i,   j-1) + insertion_cost(b)
    substitution = D(i-1, j-1) + substitution_cost(a, b)

D(i, j) is the min (or max) of the three, clamped to border_cost if set.
Every candidate that reaches the extremum contributes its flag to E(i, j);
ties are kept, not broken.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from . import default
from .errors import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)

_NOT_YET = 0
_INT64 = np.iinfo(np.int64)

InitFunc = Callable[[Hashable, int], int]
GapFunc = Callable[[Hashable], int]
PairFunc = Callable[[Hashable, Hashable], int]


def _checked_cost(value, what: str) -> int:
    """Return value as int, rejecting non-integers and values outside int64."""
    if isinstance(value, np.integer):
        value = int(value)
    if not isinstance(value, int):
        raise InvalidArgumentError(
            f"{what} must return an integer, got {value!r} ({type(value).__name__})"
        )
    if not _INT64.min <= value <= _INT64.max:
        raise InvalidArgumentError(f"{what} value {value} does not fit in int64")
    return value


# ---------------------------------------------------------------------------
# Flags and goal
# ---------------------------------------------------------------------------

class Edit(enum.IntFlag):
    """
    Edit operations recorded per cell.

    NOT_YET marks a cell that has not been computed.  BLOCKED marks the
    seeded boundary (row 0 and column 0), which is never recomputed.
    A derived cell may carry several of INSERTION, DELETION and
    SUBSTITUTION at once when those operations tie for the optimum.
    """
    NOT_YET = 0x00
    BLOCKED = 0x01
    INSERTION = 0x02
    DELETION = 0x04
    SUBSTITUTION = 0x08


class Goal(enum.Enum):
    """Direction of optimization."""
    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CostModel:
    """
    Configuration for an AlignmentEngine.

    Attributes
    ----------
    init_a, init_b : callable (symbol, position) -> int
        Seed the boundary: D(i, 0) = init_a(A[i-1], i) and
        D(0, j) = init_b(B[j-1], j).  Default: the position itself.

    insertion_cost, deletion_cost : callable (symbol) -> int
        Cost of inserting B[j-1] / deleting A[i-1].  Default: 1.

    substitution_cost : callable (a, b) -> int
        Cost (or score) of aligning a with b.  Default: 0 if equal else 2.

    transposition_cost : callable (a, b) -> int
        Accepted and stored but not used by the recurrence.
        Default: 0 if equal else 2.

    border_cost : int or None
        Under MINIMIZE no cell exceeds this value, under MAXIMIZE no
        cell falls below it.  The clamp applies to stored costs only,
        never to the edit flags.

    goal : Goal or str
        Goal.MINIMIZE (default) or Goal.MAXIMIZE; "minimize" and
        "maximize" are accepted as well.

    Any hook passed as None falls back to its default.  Hooks must return
    integers (Python int or numpy integer) within the int64 range; any
    other value raises InvalidArgumentError when the cell is filled.
    """

    init_a: Optional[InitFunc] = None
    init_b: Optional[InitFunc] = None
    insertion_cost: Optional[GapFunc] = None
    deletion_cost: Optional[GapFunc] = None
    substitution_cost: Optional[PairFunc] = None
    transposition_cost: Optional[PairFunc] = None
    border_cost: Optional[int] = None
    goal: Union[Goal, str] = Goal.MINIMIZE

    def __post_init__(self) -> None:
        defaults = (
            ("init_a", default.position_init),
            ("init_b", default.position_init),
            ("insertion_cost", default.insertion_cost),
            ("deletion_cost", default.deletion_cost),
            ("substitution_cost", default.substitution_cost),
            ("transposition_cost", default.transposition_cost),
        )
        for name, fallback in defaults:
            if getattr(self, name) is None:
                object.__setattr__(self, name, fallback)

        if isinstance(self.goal, str):
            try:
                goal = Goal(self.goal.lower())
            except ValueError:
                raise InvalidArgumentError(
                    f"Unknown goal {self.goal!r}, expected 'minimize' or 'maximize'"
                ) from None
            object.__setattr__(self, "goal", goal)
        elif not isinstance(self.goal, Goal):
            raise InvalidArgumentError(f"goal must be a Goal, got {self.goal!r}")

    @property
    def maximize(self) -> bool:
        return self.goal is Goal.MAXIMIZE

    def clamp(self, value: int) -> int:
        """Apply border_cost to a cell value according to the goal."""
        if self.border_cost is None:
            return value
        if self.maximize:
            return max(value, self.border_cost)
        return min(value, self.border_cost)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class AlignmentEngine:
    """
    Edit distance / alignment matrix over two sequences.

    The cost matrix D and the edit matrix E have shape (n+1, m+1).
    Row 0 and column 0 are seeded at construction and flagged BLOCKED;
    interior cells start as Edit.NOT_YET and are filled by compute().
    A filled cell is never written again.

    Parameters
    ----------
    seq_a, seq_b : sequence
        Indexable sequences of hashable symbols (strings, tuples of
        tokens, ...).  Neither may be None.
    model : CostModel, optional
        Defaults to CostModel() (classic edit distance).
    """

    def __init__(
        self,
        seq_a: Sequence,
        seq_b: Sequence,
        model: Optional[CostModel] = None,
    ) -> None:
        if seq_a is None:
            raise InvalidArgumentError("The first sequence must not be None")
        if seq_b is None:
            raise InvalidArgumentError("The second sequence must not be None")

        self.seq_a = seq_a
        self.seq_b = seq_b
        self.model = model if model is not None else CostModel()
        self.n = len(seq_a)
        self.m = len(seq_b)

        self._cost: NDArray[np.int64] = np.zeros((self.n + 1, self.m + 1), dtype=np.int64)
        self._edits: NDArray[np.uint8] = np.full(
            (self.n + 1, self.m + 1), int(Edit.NOT_YET), dtype=np.uint8
        )
        # populated cells form a staircase from the origin: row r holds
        # columns 1.._row_filled[r]
        self._row_filled: List[int] = [0] * (self.n + 1)
        self._init_boundary()

    def _init_boundary(self) -> None:
        model = self.model
        blocked = int(Edit.BLOCKED)

        self._edits[0, 0] = blocked
        for i in range(1, self.n + 1):
            self._cost[i, 0] = _checked_cost(model.init_a(self.seq_a[i - 1], i), "init_a")
            self._edits[i, 0] = blocked
        for j in range(1, self.m + 1):
            self._cost[0, j] = _checked_cost(model.init_b(self.seq_b[j - 1], j), "init_b")
            self._edits[0, j] = blocked

    # -----------------------------------------------------------------------
    # Read access
    # -----------------------------------------------------------------------

    @property
    def cost(self) -> NDArray[np.int64]:
        """Read-only view of the cost matrix D."""
        view = self._cost.view()
        view.flags.writeable = False
        return view

    @property
    def edits(self) -> NDArray[np.uint8]:
        """Read-only view of the edit matrix E (Edit flag values)."""
        view = self._edits.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n + 1, self.m + 1)

    @property
    def distance(self) -> int:
        """Whole-sequence result D(n, m), computed on first access."""
        return self.compute()

    def edit_at(self, i: int, j: int) -> Edit:
        self._check_index(i, j)
        return Edit(int(self._edits[i, j]))

    def is_computed(self, i: int, j: int) -> bool:
        self._check_index(i, j)
        return bool(self._edits[i, j] != _NOT_YET)

    def _check_index(self, i: int, j: int) -> None:
        if i < 0 or i > self.n:
            raise OutOfRangeError(
                f"Row index {i} is outside the first sequence (length {self.n})"
            )
        if j < 0 or j > self.m:
            raise OutOfRangeError(
                f"Column index {j} is outside the second sequence (length {self.m})"
            )

    # -----------------------------------------------------------------------
    # Computation
    # -----------------------------------------------------------------------

    def compute(self, i: Optional[int] = None, j: Optional[int] = None) -> int:
        """
        Return the optimal accumulated cost/score D(i, j).

        With no arguments this is D(n, m).  All cells D(i, j) depends on,
        i.e. the rectangle [0..i] x [0..j], are populated and cached;
        cells outside it stay NOT_YET.

        The rectangle is swept row by row instead of recursing, so
        arbitrarily long sequences do not run into the recursion limit.
        Each row resumes after its last populated column, so a cell is
        visited only when it is filled.

        Raises
        ------
        OutOfRangeError
            If i > n or j > m (or either is negative).
        """
        if i is None:
            i = self.n
        if j is None:
            j = self.m
        self._check_index(i, j)

        if self._edits[i, j] != _NOT_YET:
            return int(self._cost[i, j])

        filled = 0
        for r in range(1, i + 1):
            for c in range(self._row_filled[r] + 1, j + 1):
                self._fill_cell(r, c)
                self._row_filled[r] = c
                filled += 1

        logger.debug("compute(%d, %d): populated %d cells", i, j, filled)
        return int(self._cost[i, j])

    def _fill_cell(self, i: int, j: int) -> None:
        """
        Evaluate the recurrence at interior cell (i, j).

        Requires (i-1, j), (i, j-1) and (i-1, j-1) to be populated.
        """
        model = self.model
        cost = self._cost
        a = self.seq_a[i - 1]
        b = self.seq_b[j - 1]

        deletion = _checked_cost(model.deletion_cost(a), "deletion_cost")
        insertion = _checked_cost(model.insertion_cost(b), "insertion_cost")
        substitution = _checked_cost(model.substitution_cost(a, b), "substitution_cost")

        candidates = (
            (Edit.DELETION, int(cost[i - 1, j]) + deletion),
            (Edit.INSERTION, int(cost[i, j - 1]) + insertion),
            (Edit.SUBSTITUTION, int(cost[i - 1, j - 1]) + substitution),
        )

        pick = max if model.maximize else min
        best = pick(value for _, value in candidates)

        flags = Edit.NOT_YET
        for flag, value in candidates:
            if value == best:
                flags |= flag

        # flags keep the pre-clamp winners
        cost[i, j] = _checked_cost(model.clamp(best), "cell value")
        self._edits[i, j] = int(flags)

    def compute_all(self) -> NDArray[np.int64]:
        """Populate the whole matrix and return the read-only cost view."""
        self.compute()
        return self.cost

    # -----------------------------------------------------------------------
    # Display
    # -----------------------------------------------------------------------

    def to_string(self) -> str:
        from .render import render_matrix

        return render_matrix(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"AlignmentEngine(seq_a={self.seq_a!r}, seq_b={self.seq_b!r}, "
            f"goal={self.model.goal.value})"
        )
