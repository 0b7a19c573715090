"""
plot.py — heatmap of an AlignmentEngine's cost matrix

Draws D as a seaborn heatmap (unpopulated cells in grey) and overlays
the edit flags of every derived cell as short arrows pointing at the
predecessor(s) that achieved the optimum:

    SUBSTITUTION -> up-left, DELETION -> up, INSERTION -> left

Optionally highlights one traceback path.

Requires the plot extra:  pip install "nwlev[plot]"
"""

from typing import Dict, List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns

from .dp_core import AlignmentEngine, Edit

EDGE_COLORS = dict(
    substitution="#16946C",  # teal green
    deletion="#A058C7",      # violet
    insertion="#396CB4",     # indigo-blue
)

# (flag, (dy, dx) toward predecessor, color key)
_ARROWS = (
    (Edit.SUBSTITUTION, (-1, -1), "substitution"),
    (Edit.DELETION, (-1, 0), "deletion"),
    (Edit.INSERTION, (0, -1), "insertion"),
)


def plot_cost_matrix(
    engine: AlignmentEngine,
    path: Optional[List[Tuple[int, int]]] = None,
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[float, float] = (8, 6),
    colormap: str = "vlag",
    annotate: bool = True,
    show_edits: bool = True,
    edge_colors: Optional[Dict[str, str]] = None,
    path_color: str = "#ffcc00",
) -> plt.Figure:
    """
    Plot the cost matrix with edit-flag arrows.

    Parameters
    ----------
    engine : AlignmentEngine
        Engine whose current (possibly partial) matrices are drawn.
    path : list of (i, j), optional
        Cells to highlight, e.g. traceback(engine).path.
    ax : matplotlib Axes, optional
        Axes to draw into; a new figure is created if omitted.
    annotate : bool
        Write the cost value into each populated cell.
    show_edits : bool
        Draw the edit-flag arrows.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    if edge_colors is None:
        edge_colors = EDGE_COLORS

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    edits = engine.edits
    mat = engine.cost.astype(float)
    mat[edits == int(Edit.NOT_YET)] = np.nan

    cmap = sns.color_palette(colormap, as_cmap=True)
    cmap.set_bad(color="lightgrey")

    sns.heatmap(
        mat,
        ax=ax,
        cmap=cmap,
        center=0,
        square=True,
        cbar=False,
        annot=annotate,
        fmt=".0f",
        xticklabels=[""] + [str(b) for b in engine.seq_b],
        yticklabels=[""] + [str(a) for a in engine.seq_a],
    )
    ax.set_title(f"D ({engine.model.goal.value})")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.tick_params(axis="y", rotation=0)

    if show_edits:
        for i in range(1, engine.n + 1):
            for j in range(1, engine.m + 1):
                flags = Edit(int(edits[i, j]))
                if flags == Edit.NOT_YET:
                    continue
                x, y = j + 0.5, i + 0.5
                for flag, (dy, dx), key in _ARROWS:
                    if flags & flag:
                        ax.annotate(
                            "",
                            xy=(x + 0.35 * dx, y + 0.35 * dy),
                            xytext=(x, y),
                            arrowprops=dict(
                                arrowstyle="->",
                                color=edge_colors[key],
                                lw=1.0,
                                alpha=0.8,
                            ),
                        )

    if path:
        xs = [j + 0.5 for _, j in path]
        ys = [i + 0.5 for i, _ in path]
        ax.plot(xs, ys, color=path_color, linewidth=3, alpha=0.6, zorder=3)
        ax.scatter(xs, ys, s=40, color=path_color, edgecolors="black", zorder=4)

    return fig
