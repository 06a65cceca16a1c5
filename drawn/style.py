#!/usr/bin/env python3
"""
Default styles handed out to objects that come without explicit styling.

Every added object takes the next entry of the tables below, so several
histograms on one canvas get distinct colors and marker shapes.
"""

import ROOT

AUTO = -1  # "choose automatically" for style and color arguments

AUTO_MARKER_STYLES = [20, 21, 34, 33, 27, 24, 28, 22, 23, 29]
AUTO_LINE_STYLES = [1, 7, 9, 2, 8, 1, 7, 9, 2, 8]
AUTO_COLORS = [
    ROOT.kBlue + 1,
    ROOT.kRed + 1,
    ROOT.kGreen + 2,
    ROOT.kBlack,
    ROOT.kOrange + 2,
    ROOT.kCyan + 3,
    ROOT.kTeal - 7,
    ROOT.kPink + 2,
    ROOT.kYellow + 3,
    ROOT.kSpring + 4
]

DEFAULT_PALETTE = ROOT.kBird


def auto_marker_style(counter: int) -> int:
    return AUTO_MARKER_STYLES[counter % len(AUTO_MARKER_STYLES)]


def auto_line_style(counter: int) -> int:
    return AUTO_LINE_STYLES[counter % len(AUTO_LINE_STYLES)]


def auto_color(counter: int) -> int:
    return AUTO_COLORS[counter % len(AUTO_COLORS)]


def apply_style(obj, marker_style: int, line_style: int, color: int, size: int) -> None:
    """
    Apply marker and line attributes to a histogram, graph or function.

    Args:
        obj: ROOT object with TAttMarker and TAttLine
        marker_style: ROOT marker style
        line_style: ROOT line style
        color: Color used for both markers and lines
        size: Marker size and line width
    """
    obj.SetMarkerStyle(marker_style)
    obj.SetLineStyle(line_style)
    obj.SetMarkerColor(color)
    obj.SetLineColor(color)
    obj.SetMarkerSize(size)
    obj.SetLineWidth(size)
