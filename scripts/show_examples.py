#!/usr/bin/env python3
"""
show_examples.py — print annotated matrices for a handful of classic pairs

Prints the rendered cost / edit matrix for edit distance, global
alignment and clamped local alignment examples.  With --plot, also
writes one heatmap per example into the given directory.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nwlev.aligners import (
    classic_edit_distance,
    global_alignment,
    clamped_local_alignment,
    traceback,
)


# =============================================================================
# CONFIGURATION
# =============================================================================

EXAMPLES = [
    ("edit_intention_execution", lambda: classic_edit_distance("INTENTION", "EXECUTION")),
    ("edit_bane_barn", lambda: classic_edit_distance("bane", "barn")),
    ("edit_vase_cave", lambda: classic_edit_distance("vase", "cave")),
    ("nw_acgtc_agtc", lambda: global_alignment("ACGTC", "AGTC")),
    (
        "nw_atc_aatc",
        lambda: global_alignment(
            "ATC", "AATC", gap_cost=1,
            substitution_score=lambda a, b: 0 if a == b else -2,
        ),
    ),
    ("local_atcat_attatc", lambda: clamped_local_alignment("ATCAT", "ATTATC")),
]


def main():
    parser = argparse.ArgumentParser(description='Print annotated edit distance / alignment matrices')
    parser.add_argument('--plot', type=str, default=None,
                        help='Directory to write heatmaps into (requires nwlev[plot])')
    parser.add_argument('--format', '-f', type=str, default='png',
                        help='Image format for --plot (default: png)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    out_dir = None
    if args.plot:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        from nwlev.plot import plot_cost_matrix

        out_dir = Path(args.plot)
        out_dir.mkdir(parents=True, exist_ok=True)

    for name, build in EXAMPLES:
        engine = build()
        tb = traceback(engine)
        print(f"# {name}: {engine.seq_a} vs {engine.seq_b} -> {tb.score}")
        print(engine)
        print(f"  {tb.aligned_a}\n  {tb.aligned_b}\n  {tb.operations}\n")

        if out_dir is not None:
            fig = plot_cost_matrix(engine, path=tb.path)
            output = out_dir / f"{name}.{args.format}"
            fig.savefig(output, bbox_inches='tight')
            plt.close(fig)
            print(f"Saved: {output}")


if __name__ == '__main__':
    main()
