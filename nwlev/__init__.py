"""
nwlev: generalized edit distance and Needleman-Wunsch alignment.
"""

# =============================================================================
# CORE
# =============================================================================

from .dp_core import (
    AlignmentEngine,
    CostModel,
    Edit,
    Goal,
)

from .errors import (
    NWLevError,
    InvalidArgumentError,
    OutOfRangeError,
)


# =============================================================================
# PRESETS AND TRACEBACK
# =============================================================================

from .aligners import (
    Traceback,
    classic_edit_distance,
    global_alignment,
    clamped_local_alignment,
    edit_distance,
    global_alignment_score,
    traceback,
)


# =============================================================================
# RENDERING AND VALIDATION
# =============================================================================

from .render import format_cell, render_matrix

from .validation import (
    levenshtein_reference,
    needleman_wunsch_reference,
    check_engine_vs_reference,
    check_alignment_vs_reference,
)


# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install nwlev[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "nwlev[plot]"'
    )

try:
    from .plot import plot_cost_matrix
    PLOT_AVAILABLE = True
except ImportError:
    def plot_cost_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_cost_matrix")
    PLOT_AVAILABLE = False


__all__ = [
    # Core
    "AlignmentEngine",
    "CostModel",
    "Edit",
    "Goal",
    # Errors
    "NWLevError",
    "InvalidArgumentError",
    "OutOfRangeError",
    # Presets
    "Traceback",
    "classic_edit_distance",
    "global_alignment",
    "clamped_local_alignment",
    "edit_distance",
    "global_alignment_score",
    "traceback",
    # Rendering
    "format_cell",
    "render_matrix",
    # Validation
    "levenshtein_reference",
    "needleman_wunsch_reference",
    "check_engine_vs_reference",
    "check_alignment_vs_reference",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_cost_matrix",
]
