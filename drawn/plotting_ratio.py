#!/usr/bin/env python3
"""
PlottingRatio - histograms on an upper pad with their ratios on a lower pad.

The canvas is split into:
- HistoPad (upper two thirds): histograms and top functions with the main legend
- RatioPad (lower third): ratios, bottom functions and all lines
- WhitePad: small white box hiding the clash of the y axis labels where
  both pads meet
"""

from typing import Tuple

import ROOT

from .options import function_legend_option, legend_draw_option, ratio_legend_option
from .plotting import Plotting
from .ranges import estimate_ratio_range, resolve_range
from .style import AUTO

LABEL_AND_TITLE_SIZE = 0.04


def divide_histograms(numerator: ROOT.TH1, denominator: ROOT.TH1, name: str) -> ROOT.TH1:
    """
    Ratio of two histograms with identical binning.

    Args:
        numerator: Numerator histogram (left untouched)
        denominator: Denominator histogram
        name: Name of the ratio histogram

    Returns:
        Clone of the numerator divided by the denominator
    """
    ratio = numerator.Clone(name)
    ratio.SetDirectory(0)
    ratio.SetTitle("")
    ratio.Divide(denominator)
    return ratio


class PlottingRatio(Plotting):
    def __init__(self, verbose: bool = False):
        super().__init__(verbose)

        self.ratios = []
        self.top_funcs = []
        self.bottom_funcs = []

        # Ratios usually compare to the first histogram, which has no ratio
        # of its own: starting at 1 gives ratios the colors of their histograms
        self.counter_ratio = 1

        self.histo_pad = None
        self.ratio_pad = None
        self.white_pad = None
        self.ratio_axis_hist = None
        self.legend_ratio = None

        self.white_config = {
            'x1': 0.04,
            'x2': 0.095,
            'y1': 0.32,
            'y2': 0.35,
            'red': False
        }

        self.legend_ratio_config = {
            'x1': 0.7,
            'x2': 0.95,
            'y1': 0.15,
            'y2': 0.25,
            'text_size': 0.6 * 0.035
        }

    def new_hist(self, hist: ROOT.TH1, label: str = "", style: int = AUTO, size: int = 1,
                 color: int = AUTO, opt: str = "p") -> ROOT.TH1:
        """Add a histogram to the upper pad."""
        self._add_histogram(self.hists, hist, label, style, size, color, opt,
                            self.counter, "new_hist")
        # Only count up when auto styling was used, so no good colors are skipped
        if style == AUTO and color == AUTO:
            self.counter += 1
        return hist

    def new_ratio(self, hist: ROOT.TH1, label: str = "", style: int = AUTO, size: int = 1,
                  color: int = AUTO, opt: str = "p") -> ROOT.TH1:
        """Add a histogram to the lower (ratio) pad."""
        self._add_histogram(self.ratios, hist, label, style, size, color, opt,
                            self.counter_ratio, "new_ratio")
        if style == AUTO and color == AUTO:
            self.counter_ratio += 1
        return hist

    def new_top_func(self, func: ROOT.TF1, label: str = "", style: int = AUTO, size: int = 1,
                     color: int = AUTO, opt: str = "l") -> ROOT.TF1:
        return self._add_function(self.top_funcs, func, label, style, size, color, opt,
                                  "new_top_func")

    def new_bot_func(self, func: ROOT.TF1, label: str = "", style: int = AUTO, size: int = 1,
                     color: int = AUTO, opt: str = "l") -> ROOT.TF1:
        return self._add_function(self.bottom_funcs, func, label, style, size, color, opt,
                                  "new_bot_func")

    def set_white(self, low: float, left: float, up: float, right: float,
                  red: bool = False) -> None:
        """
        Move the white box covering the y label clash (e.g. after changing
        margins). red=True makes it visible for positioning.
        """
        self.white_config.update({'x1': left, 'x2': right, 'y1': low, 'y2': up, 'red': red})

    def set_legend_ratio(self, x1: float = 0.7, x2: float = 0.95,
                         y1: float = 0.15, y2: float = 0.25) -> None:
        """Position of the ratio legend, analogous to set_legend."""
        self.legend_ratio_config.update({'x1': x1, 'x2': x2, 'y1': y1, 'y2': y2})

    def set_axis_label(self, labelx: str = "", labely: str = "", labelz: str = "",
                       offsetx: float = 1., offsety: float = 1.) -> None:
        """The ratio title (labelz) uses half the y title offset."""
        self.axis_config['labels'] = {'x': labelx, 'y': labely, 'z': labelz}
        self.axis_config['label_offsets'] = {'x': offsetx, 'y': offsety}

    def plot(self, name: str = "dummy.pdf", logx: bool = False, logy: bool = False,
             logz: bool = False) -> ROOT.TCanvas:
        """
        Draw both pads and save the canvas.

        Args:
            name: Output file, the extension selects the format
            logx: Logarithmic x axis on both pads
            logy: Logarithmic y axis of the upper pad
            logz: Logarithmic y axis of the ratio pad

        Returns:
            The canvas that was saved
        """
        if not self.hists:
            raise ValueError("No histograms added for plotting.")
        if not self.ratios:
            raise ValueError("No ratios added for plotting.")

        canvas = self._initialize_canvas(name, logx, logy)
        axis_hist, ratio_axis_hist = self._initialize_axis(logy)
        axis_hist.Draw()

        legend = self._initialize_legend()
        legend_ratio = self._initialize_legend_ratio()

        # Upper pad
        self._draw_entries(self.hists)
        self._add_legend_entries(legend, self.hists, legend_draw_option)
        self._draw_entries(self.top_funcs)
        self._add_legend_entries(legend, self.top_funcs, function_legend_option)

        # Lower pad
        canvas.cd()
        self.ratio_pad.Draw()
        self.ratio_pad.cd()
        self.ratio_pad.SetTickx(1)
        self.ratio_pad.SetTicky(1)
        self.ratio_pad.SetLogx(logx)
        self.ratio_pad.SetLogy(logz)
        ratio_axis_hist.Draw()

        self._draw_entries(self.ratios)
        self._add_legend_entries(legend_ratio, self.ratios, ratio_legend_option)
        self._draw_entries(self.bottom_funcs)
        self._add_legend_entries(legend_ratio, self.bottom_funcs, function_legend_option)

        # Lines are almost only needed here (e.g. marking ratio 1)
        for entry in self.lines:
            entry['object'].Draw("same")

        canvas.cd()
        if self.white_config['red']:
            self.white_pad.SetFillColor(ROOT.kRed)
        self.white_pad.Draw()

        # Legends and text live on the full canvas in relative coordinates
        canvas.cd()
        canvas.Update()

        legend.Draw("same")
        legend_ratio.Draw("same")
        for latex in self.latex:
            latex.Draw("same")

        self._save(canvas, name)
        return canvas

    def _initialize_canvas(self, name: str, logx: bool, logy: bool) -> ROOT.TCanvas:
        """Canvas with three pads; the configured canvas size is not used here."""
        cfg = self.canvas_config
        white = self.white_config
        canvas_name = self._canvas_name(name)

        canvas = ROOT.TCanvas(canvas_name, "", 1000, 1000)

        self.histo_pad = ROOT.TPad(f"{canvas_name}_histo", "HistoPad", 0.0, 1.0 / 3.0, 1, 1)
        self.ratio_pad = ROOT.TPad(f"{canvas_name}_ratio", "RatioPad", 0.0, 0.0, 1, 1.0 / 3.0)
        self.white_pad = ROOT.TPad(f"{canvas_name}_white", "WhitePad",
                                   white['x1'], white['y1'], white['x2'], white['y2'])

        self.histo_pad.SetTopMargin(cfg['top_margin'])
        self.histo_pad.SetRightMargin(cfg['right_margin'])
        self.histo_pad.SetLeftMargin(cfg['left_margin'])
        self.histo_pad.SetBottomMargin(0)
        self.ratio_pad.SetTopMargin(0)
        self.ratio_pad.SetRightMargin(cfg['right_margin'])
        self.ratio_pad.SetLeftMargin(cfg['left_margin'])
        self.ratio_pad.SetBottomMargin(cfg['bottom_margin'] * 2)

        canvas.cd()
        self.histo_pad.Draw()
        self.histo_pad.cd()

        self.histo_pad.SetTickx(1)
        self.histo_pad.SetTicky(1)
        self.histo_pad.SetLogy(logy)
        self.histo_pad.SetLogx(logx)

        self.canvas = canvas
        return canvas

    def _ratio_range(self) -> Tuple[float, float]:
        ratios = [entry['object'] for entry in self.ratios]
        estimate = estimate_ratio_range([r.GetMinimum() for r in ratios],
                                        [r.GetMaximum() for r in ratios])
        return resolve_range(self.axis_config['ranges']['z'], estimate)

    def _initialize_axis(self, logy: bool) -> Tuple[ROOT.TH2D, ROOT.TH2D]:
        """Axis histograms for both pads; the x title only shows on the ratio pad."""
        (xlow, xup), (ylow, yup) = self._auto_axis_ranges(logy)
        rlow, rup = self._ratio_range()
        labels = self.axis_config['labels']
        offsets = self.axis_config['label_offsets']
        canvas_name = self.canvas.GetName()
        size = LABEL_AND_TITLE_SIZE

        axis_hist = ROOT.TH2D(f"{canvas_name}_axis", "", 1000, xlow, xup, 1000, ylow, yup)
        axis_hist.SetDirectory(0)
        axis_hist.SetStats(0)

        axis_hist.GetYaxis().SetLabelSize(size)
        axis_hist.GetYaxis().SetTitleSize(size)
        axis_hist.GetYaxis().SetTitle(labels['y'])
        axis_hist.GetXaxis().SetTitle("")
        axis_hist.GetYaxis().SetTitleFont(62)
        axis_hist.GetXaxis().SetTitleFont(62)
        axis_hist.GetXaxis().SetTitleOffset(offsets['x'])
        axis_hist.GetYaxis().SetTitleOffset(offsets['y'])

        ratio_axis_hist = ROOT.TH2D(f"{canvas_name}_ratio_axis", "", 1000, xlow, xup, 1000, rlow, rup)
        ratio_axis_hist.SetDirectory(0)
        ratio_axis_hist.SetStats(0)

        # The ratio pad is a third of the height: scale labels up to match
        ratio_axis_hist.GetXaxis().SetLabelSize(size * 1.7)
        ratio_axis_hist.GetYaxis().SetLabelSize(size * 1.7)
        ratio_axis_hist.GetXaxis().SetTitleSize(size * 2)
        ratio_axis_hist.GetYaxis().SetTitleSize(size * 2)
        ratio_axis_hist.GetYaxis().SetNdivisions(8)
        ratio_axis_hist.GetXaxis().SetTitle(labels['x'])
        ratio_axis_hist.GetYaxis().SetTitle(labels['z'])
        ratio_axis_hist.GetYaxis().SetTitleFont(62)
        ratio_axis_hist.GetXaxis().SetTitleFont(62)
        ratio_axis_hist.GetYaxis().SetTitleOffset(offsets['y'] / 2.)
        ratio_axis_hist.GetXaxis().SetTitleOffset(offsets['x'])

        self.axis_hist = axis_hist
        self.ratio_axis_hist = ratio_axis_hist
        return axis_hist, ratio_axis_hist

    def _initialize_legend_ratio(self) -> ROOT.TLegend:
        cfg = self.legend_ratio_config
        self.legend_ratio = self._create_legend(cfg['x1'], cfg['x2'], cfg['y1'], cfg['y2'],
                                                cfg['text_size'])
        return self.legend_ratio
