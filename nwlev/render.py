r"""
render.py — fixed-width text rendering of the cost / edit matrices

Layout for A = "a", B = "b" after compute() (row 0 unlabeled):

                b
    
          0,    1;
    a     1,\<| 2;

Each populated cell is three marker columns followed by the cost right
justified to width 2:

    '\'   SUBSTITUTION set
    '<'   INSERTION set
    '|'   DELETION set

Unpopulated cells print as '--'.  Cells are separated by ',' and each
row ends with ';'.  This is a diagnostic format, not a parsed one.
"""

from __future__ import annotations

from .dp_core import AlignmentEngine, Edit

PLACEHOLDER = "--"
CELL_SEP = ","
ROW_END = ";"


def format_cell(edit: Edit, cost: int) -> str:
    """Format a single cell as markers + cost, or the placeholder."""
    if edit == Edit.NOT_YET:
        return PLACEHOLDER
    return (
        ("\\" if edit & Edit.SUBSTITUTION else " ")
        + ("<" if edit & Edit.INSERTION else " ")
        + ("|" if edit & Edit.DELETION else " ")
        + str(cost).rjust(2)
    )


def render_matrix(engine: AlignmentEngine) -> str:
    """Render the engine's current (possibly partial) matrices as text."""
    cost = engine.cost
    lines = ["        " + "".join(f"    {b} " for b in engine.seq_b), ""]

    for i in range(engine.n + 1):
        label = f"{engine.seq_a[i - 1]} " if i > 0 else "  "
        cells = CELL_SEP.join(
            format_cell(engine.edit_at(i, j), int(cost[i, j]))
            for j in range(engine.m + 1)
        )
        lines.append(label + cells + ROW_END)

    return "\n".join(lines) + "\n"
