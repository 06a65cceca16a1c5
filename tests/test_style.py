"""
Tests for the automatic style tables.
"""

import pytest

ROOT = pytest.importorskip("ROOT")

from drawn.style import (
    AUTO_COLORS,
    AUTO_MARKER_STYLES,
    apply_style,
    auto_color,
    auto_line_style,
    auto_marker_style,
)


def test_first_entries():
    assert auto_marker_style(0) == 20
    assert auto_line_style(1) == 7
    assert auto_color(2) == ROOT.kGreen + 2


def test_tables_wrap_around():
    n = len(AUTO_MARKER_STYLES)
    assert auto_marker_style(n) == auto_marker_style(0)
    assert auto_color(len(AUTO_COLORS) + 3) == auto_color(3)


def test_apply_style_sets_markers_and_lines():
    graph = ROOT.TGraph()
    apply_style(graph, 33, 9, ROOT.kOrange + 2, 2)

    assert graph.GetMarkerStyle() == 33
    assert graph.GetLineStyle() == 9
    assert graph.GetMarkerColor() == graph.GetLineColor() == ROOT.kOrange + 2
    assert graph.GetMarkerSize() == pytest.approx(2)
    assert graph.GetLineWidth() == 2
