"""
test_plot.py — Smoke tests for the optional heatmap (needs nwlev[plot])
"""

import numpy as np
import pytest

pytest.importorskip("matplotlib")
pytest.importorskip("seaborn")

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from nwlev.aligners import classic_edit_distance, traceback
from nwlev.plot import plot_cost_matrix


class TestPlotCostMatrix:

    def test_full_matrix(self):
        engine = classic_edit_distance("bane", "barn")
        tb = traceback(engine)
        fig = plot_cost_matrix(engine, path=tb.path)
        assert len(fig.axes) >= 1
        plt.close(fig)

    def test_partial_matrix_leaves_engine_untouched(self):
        engine = classic_edit_distance("kitten", "sitting")
        engine.compute(2, 3)
        before = engine.cost.copy()
        fig = plot_cost_matrix(engine, annotate=False)
        np.testing.assert_array_equal(engine.cost, before)
        assert not engine.is_computed(6, 7)
        plt.close(fig)

    def test_existing_axes(self):
        engine = classic_edit_distance("ab", "ba")
        engine.compute()
        fig, ax = plt.subplots()
        out = plot_cost_matrix(engine, ax=ax, show_edits=False)
        assert out is fig
        plt.close(fig)
