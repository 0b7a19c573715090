"""
default.py — Default parameters for nwlev

Provides the default cost hooks used by CostModel (unit insertion and
deletion, 0/2 substitution) and the +1/-1/gap 1 scheme used by the
global alignment preset.
"""

# Classic edit distance
INSERTION_COST = 1
DELETION_COST = 1
SUBSTITUTION_COST = 2
TRANSPOSITION_COST = 2

# Global alignment (linear gaps)
GAP_COST = 1
MATCH_SCORE = 1
MISMATCH_SCORE = -1


def position_init(symbol, position: int) -> int:
    """Boundary seed D(i,0) = i, D(0,j) = j."""
    return position


def insertion_cost(symbol) -> int:
    return INSERTION_COST


def deletion_cost(symbol) -> int:
    return DELETION_COST


def substitution_cost(a, b) -> int:
    return 0 if a == b else SUBSTITUTION_COST


def transposition_cost(a, b) -> int:
    return 0 if a == b else TRANSPOSITION_COST


def match_mismatch_score(a, b) -> int:
    return MATCH_SCORE if a == b else MISMATCH_SCORE


def edit_params() -> dict:
    """
    Bundle the classic edit distance hooks into a dict for easy unpacking.

    Usage:
        model = CostModel(**edit_params())
    """
    return {
        "init_a": position_init,
        "init_b": position_init,
        "insertion_cost": insertion_cost,
        "deletion_cost": deletion_cost,
        "substitution_cost": substitution_cost,
        "transposition_cost": transposition_cost,
    }


def alignment_params() -> dict:
    """
    Default global alignment parameters, matching the keyword arguments of
    aligners.global_alignment.

    Usage:
        engine = global_alignment(a, b, **alignment_params())
    """
    return {
        "gap_cost": GAP_COST,
        "substitution_score": match_mismatch_score,
    }
