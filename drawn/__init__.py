#!/usr/bin/env python3
"""
Drawn Package

Pre-styled ROOT plots: consistent colors, markers, margins, legends and axis
ranges for histograms, with the drawing and file export left to ROOT.

Components:
- Plotting1D: 1D histograms, graphs and functions overlaid on one canvas
- Plotting2D: a 2D histogram with a color palette
- PlottingRatio: histograms on top, their ratios on a lower pad
- PlottingPaint: angles, lines and text for sketches
- load_histogram / list_histograms: read histograms from ROOT files

Usage:
    from drawn import Plotting1D

    plotter = Plotting1D()
    plotter.new_hist(hist, "Data")
    plotter.plot("data.pdf", logy=True)
"""

from .histogram_io import list_histograms, load_histogram
from .plotting_1d import Plotting1D
from .plotting_2d import Plotting2D
from .plotting_paint import PlottingPaint
from .plotting_ratio import PlottingRatio, divide_histograms
from .style import AUTO

__all__ = [
    'AUTO',
    'Plotting1D',
    'Plotting2D',
    'PlottingRatio',
    'PlottingPaint',
    'divide_histograms',
    'list_histograms',
    'load_histogram'
]

__version__ = '1.0.0'
