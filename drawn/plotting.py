#!/usr/bin/env python3
"""
Plotting - settings and helpers shared by all plotters.

The class itself is never used directly. Plotting1D, Plotting2D,
PlottingRatio and PlottingPaint inherit:
- Canvas, legend and axis configuration (set_margins, set_legend, set_axis_range)
- Text and line annotations (draw_latex, new_line)
- Automatic axis ranges derived from the added histograms/graphs/functions
"""

import itertools
import os
from typing import Dict, List, Optional, Tuple

import numpy as np
import ROOT

from .export import save_canvas
from .options import hist_draw_option, hist_line_style, split_latex
from .ranges import estimate_y_range, resolve_range
from .style import AUTO, apply_style, auto_color, auto_line_style, auto_marker_style

# Enable batch mode
ROOT.gROOT.SetBatch(True)

DEFAULT_Z_RANGE = (0.0, 2.0)

# ROOT deletes a live canvas when a new one takes its name
_canvas_ids = itertools.count()


def positive_minimum(hist: ROOT.TH1) -> Optional[float]:
    """Smallest strictly positive bin content, None if there is none."""
    contents = np.array([hist.GetBinContent(i) for i in range(1, hist.GetNbinsX() + 1)])
    positive = contents[contents > 0]
    if len(positive) == 0:
        return None
    return float(positive.min())


class Plotting:
    def __init__(self, verbose: bool = False):
        """
        Initialize the shared plotting state.

        Args:
            verbose: Print every file that is written
        """
        self.verbose = verbose

        # ROOT objects of the last plot, kept alive until the next one
        self.canvas = None
        self.axis_hist = None
        self.legend = None

        # Added objects; entries are dicts with 'object', 'label', 'option'
        self.hists = []
        self.graphs = []
        self.funcs = []
        self.lines = []
        self.curly_lines = []
        self.latex = []

        # Counts added objects, the next auto style is taken from here
        self.counter = 0

        # Canvas configuration
        self.canvas_config = {
            'width': 1200,
            'height': 1000,
            'left_margin': 0.1,
            'right_margin': 0.01,
            'bottom_margin': 0.1,
            'top_margin': 0.01
        }

        # Legend configuration (NDC)
        self.legend_config = {
            'x1': 0.15,
            'x2': 0.4,
            'y1': 0.7,
            'y2': 0.9,
            'text_font': 42,
            'text_size': 0.035,
            'border_size': 0,
            'fill_style': 1001  # solid, set to 0 for a hollow legend
        }

        # None edges are estimated from the added objects when plotting
        self.axis_config = {
            'ranges': {'x': (None, None), 'y': (None, None), 'z': DEFAULT_Z_RANGE},
            'labels': {'x': "x", 'y': "y", 'z': "Ratio"},
            'label_offsets': {'x': 1., 'y': 1.}
        }

    def set_legend(self, x1: float = 0.15, x2: float = 0.4,
                   y1: float = 0.7, y2: float = 0.9) -> None:
        """Set the legend position in relative (NDC) coordinates."""
        self.legend_config.update({'x1': x1, 'x2': x2, 'y1': y1, 'y2': y2})

    def set_axis_range(self, xlow: Optional[float] = None, xup: Optional[float] = None,
                       ylow: Optional[float] = None, yup: Optional[float] = None,
                       zlow: Optional[float] = DEFAULT_Z_RANGE[0],
                       zup: Optional[float] = DEFAULT_Z_RANGE[1]) -> None:
        """
        Set axis ranges; edges left at None are estimated automatically.

        The z range is the color axis of 2D plots and the ratio axis of
        ratio plots.
        """
        self.axis_config['ranges'] = {
            'x': (xlow, xup),
            'y': (ylow, yup),
            'z': (zlow, zup)
        }

    def set_margins(self, low: float = 0.1, left: float = 0.1, up: float = 0.01,
                    right: float = 0.01, width: int = 1200, height: int = 1000) -> None:
        """Set the relative empty space around the frame and the canvas size in pixels."""
        self.canvas_config.update({
            'bottom_margin': low,
            'left_margin': left,
            'top_margin': up,
            'right_margin': right,
            'width': width,
            'height': height
        })

    def set_canvas_config(self, **kwargs) -> None:
        """
        Update canvas or legend configuration.

        Args:
            **kwargs: Configuration parameters to update
        """
        for key, value in kwargs.items():
            if key in self.canvas_config:
                self.canvas_config[key] = value
            elif key in self.legend_config:
                self.legend_config[key] = value

    def get_canvas_config(self) -> Dict:
        """Get current canvas and legend configuration."""
        return {**self.canvas_config, **self.legend_config}

    def draw_latex(self, x: float = 0.2, y: float = 0.2, text: str = "",
                   text_size: float = 0.035, line_spacing: float = 0.05,
                   font: int = 42, color: int = ROOT.kBlack) -> List[ROOT.TLatex]:
        """
        Add text that is drawn when plotting.

        Args:
            x, y: Position of the first line in NDC coordinates
            text: Text, ';' starts a new line
            text_size: ROOT text size
            line_spacing: Vertical distance between lines (NDC)
            font: ROOT font code
            color: ROOT color

        Returns:
            The TLatex objects, one per line
        """
        added = []
        for i, line in enumerate(split_latex(text)):
            latex = ROOT.TLatex(x, y - i * line_spacing, line)
            latex.SetNDC()
            latex.SetTextFont(font)
            latex.SetTextColor(color)
            latex.SetTextSize(text_size)
            added.append(latex)

        self.latex.extend(added)
        return added

    def new_line(self, x1: float = 0, y1: float = 0, x2: float = 1, y2: float = 1,
                 style: int = 1, color: int = ROOT.kBlack, width: int = 1, label: str = ""):
        """
        Add a line in axis coordinates.

        A negative style draws a curly line (e.g. a photon) with wavelength
        -0.02*style instead. Curly lines never enter the legend.
        """
        if style < 0:
            line = ROOT.TCurlyLine(x1, y1, x2, y2)
            line.SetLineColor(color)
            line.SetLineWidth(width)
            line.SetWaveLength(-0.02 * style)
            self.curly_lines.append(line)
        else:
            line = ROOT.TLine(x1, y1, x2, y2)
            line.SetLineColor(color)
            line.SetLineStyle(style)
            line.SetLineWidth(width)
            self.lines.append({'object': line, 'label': label, 'option': "l"})

        return line

    @staticmethod
    def _check_input(obj, root_class, operation: str, excluded: Tuple = ()) -> None:
        if obj is None:
            raise ValueError(f"{operation} was given None")
        if not isinstance(obj, root_class) or (excluded and isinstance(obj, excluded)):
            raise TypeError(f"{operation} expects a {root_class.__name__}, "
                            f"got {type(obj).__name__}")

    @staticmethod
    def _canvas_name(name: str) -> str:
        """Unique per call: can_<output stem>_<n>."""
        stem = os.path.splitext(os.path.basename(name))[0]
        return f"can_{stem}_{next(_canvas_ids)}"

    def _create_legend(self, x1: float, x2: float, y1: float, y2: float,
                       text_size: float) -> ROOT.TLegend:
        legend = ROOT.TLegend(x1, y1, x2, y2)
        legend.SetTextFont(self.legend_config['text_font'])
        legend.SetTextSize(text_size)
        legend.SetBorderSize(self.legend_config['border_size'])  # no black rectangle
        legend.SetFillStyle(self.legend_config['fill_style'])
        return legend

    def _initialize_legend(self) -> ROOT.TLegend:
        cfg = self.legend_config
        self.legend = self._create_legend(cfg['x1'], cfg['x2'], cfg['y1'], cfg['y2'],
                                          cfg['text_size'])
        return self.legend

    @staticmethod
    def _add_legend_entries(legend: ROOT.TLegend, entries: List[Dict], option_rule) -> None:
        """Entries with an empty label stay out of the legend."""
        for entry in entries:
            if entry['label']:
                legend.AddEntry(entry['object'], entry['label'], option_rule(entry['option']))

    def _auto_axis_ranges(self, logy: bool) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """
        Resolve x and y ranges, estimating every edge the user left unset.

        Histograms take precedence over graphs, graphs over functions. The x
        range of histograms is taken from the first one, assuming all share
        the same binning.

        Returns:
            ((xlow, xup), (ylow, yup))
        """
        if self.hists:
            hists = [entry['object'] for entry in self.hists]
            maxima = [h.GetMaximum() for h in hists]
            if logy:
                minima = [m for m in (positive_minimum(h) for h in hists) if m is not None]
            else:
                minima = [h.GetMinimum() for h in hists]

            first = hists[0]
            nbins = first.GetNbinsX()
            x_estimate = (first.GetBinLowEdge(1),
                          first.GetBinLowEdge(nbins) + first.GetBinWidth(nbins))

        elif self.graphs:
            frames = [entry['object'].GetHistogram() for entry in self.graphs]
            maxima = [frame.GetMaximum() for frame in frames]
            if logy:
                minima = []
                for entry in self.graphs:
                    graph = entry['object']
                    values = [graph.GetPointY(i) for i in range(graph.GetN())]
                    minima.extend(v for v in values if v > 0)
            else:
                minima = [frame.GetMinimum() for frame in frames]

            x_estimate = (min(frame.GetXaxis().GetXmin() for frame in frames),
                          max(frame.GetXaxis().GetXmax() for frame in frames))

        elif self.funcs:
            print("Warning: Only functions have been added, axis ranges are taken from the functions")
            funcs = [entry['object'] for entry in self.funcs]
            maxima = [f.GetMaximum() for f in funcs]
            minima = [f.GetMinimum() for f in funcs]
            x_estimate = (min(f.GetXmin() for f in funcs), max(f.GetXmax() for f in funcs))

        else:
            raise ValueError("No histogram or graph given.")

        y_estimate = estimate_y_range(minima, maxima, logy)

        ranges = self.axis_config['ranges']
        return resolve_range(ranges['x'], x_estimate), resolve_range(ranges['y'], y_estimate)

    @staticmethod
    def _style_histogram(hist: ROOT.TH1, style: int, size: int, color: int,
                         opt: str, counter: int) -> None:
        hist.SetStats(0)
        apply_style(hist,
                    auto_marker_style(counter) if style == AUTO else style,
                    hist_line_style(opt, style),
                    auto_color(counter) if color == AUTO else color,
                    size)

    def _add_histogram(self, target: List[Dict], hist: ROOT.TH1, label: str, style: int,
                       size: int, color: int, opt: str, counter: int,
                       operation: str) -> ROOT.TH1:
        """Style a 1D histogram with the given counter and append it to target."""
        self._check_input(hist, ROOT.TH1, operation, excluded=(ROOT.TH2, ROOT.TH3))

        self._style_histogram(hist, style, size, color, opt, counter)
        target.append({'object': hist, 'label': label, 'option': hist_draw_option(opt)})
        return hist

    def _add_function(self, target: List[Dict], func: ROOT.TF1, label: str, style: int,
                      size: int, color: int, opt: str, operation: str) -> ROOT.TF1:
        """Style a function with the shared counter and append it to target."""
        self._check_input(func, ROOT.TF1, operation)

        apply_style(func,
                    auto_marker_style(self.counter) if style == AUTO else style,
                    auto_line_style(self.counter) if style == AUTO else style,
                    auto_color(self.counter) if color == AUTO else color,
                    size)
        target.append({'object': func, 'label': label, 'option': opt})

        self.counter += 1
        return func

    @staticmethod
    def _draw_entries(entries: List[Dict]) -> None:
        for entry in entries:
            entry['object'].Draw(f"same {entry['option']}")

    def _save(self, canvas: ROOT.TCanvas, name: str) -> str:
        path = save_canvas(canvas, name)
        if self.verbose:
            print(f"Saved plot: {path}")
        return path
