#!/usr/bin/env python3
"""
Plotting2D - one 2D histogram with a color palette, plus optional functions.
"""

import ROOT

from .options import function_legend_option
from .plotting import DEFAULT_Z_RANGE, Plotting
from .style import AUTO, DEFAULT_PALETTE


class Plotting2D(Plotting):
    def __init__(self, verbose: bool = False):
        super().__init__(verbose)
        self.hist = None
        self.draw_option = "COLZ"

    def new_hist(self, hist: ROOT.TH2, opt: str = "COLZ",
                 palette: int = DEFAULT_PALETTE) -> ROOT.TH2:
        """
        Set the histogram to plot. A second call replaces the first histogram.

        Args:
            hist: 2D histogram (TH2F, TH2D, ...)
            opt: Draw option
            palette: ROOT palette, see TColor for the predefined ones

        Returns:
            The histogram
        """
        self._check_input(hist, ROOT.TH2, "new_hist")

        self.hist = hist
        self.draw_option = opt
        ROOT.gStyle.SetPalette(palette)
        return hist

    def new_func(self, func: ROOT.TF1, label: str = "", style: int = AUTO, size: int = 1,
                 color: int = AUTO, opt: str = "l") -> ROOT.TF1:
        return self._add_function(self.funcs, func, label, style, size, color, opt, "new_func")

    def set_axis_label(self, labelx: str = "", labely: str = "",
                       offsetx: float = 1., offsety: float = 1.) -> None:
        self.axis_config['labels'].update({'x': labelx, 'y': labely})
        self.axis_config['label_offsets'] = {'x': offsetx, 'y': offsety}

    def plot(self, name: str = "dummy.pdf", logx: bool = False, logy: bool = False,
             logz: bool = False, numcontours: int = 100) -> ROOT.TCanvas:
        """
        Draw the histogram with its palette and save it.

        Args:
            name: Output file, the extension selects the format
            logx, logy, logz: Logarithmic axes
            numcontours: Number of color levels

        Returns:
            The canvas that was saved
        """
        if self.hist is None:
            raise ValueError("No histogram added for plotting.")

        canvas = self._initialize_canvas(name, logx, logy, logz)
        self._initialize_axis()
        legend = self._initialize_legend()
        ROOT.gStyle.SetNumberContours(numcontours)

        self.hist.Draw(self.draw_option)

        self._draw_entries(self.funcs)
        self._add_legend_entries(legend, self.funcs, function_legend_option)

        for latex in self.latex:
            latex.Draw("same")
        for entry in self.lines:
            entry['object'].Draw("same")

        legend.Draw("same")
        self._save(canvas, name)
        return canvas

    def _initialize_canvas(self, name: str, logx: bool, logy: bool,
                           logz: bool) -> ROOT.TCanvas:
        cfg = self.canvas_config

        canvas = ROOT.TCanvas(self._canvas_name(name), "", cfg['width'], cfg['height'])
        canvas.SetLeftMargin(cfg['left_margin'])
        canvas.SetRightMargin(1.2 * cfg['right_margin'])  # room for the z axis
        canvas.SetBottomMargin(cfg['bottom_margin'])
        canvas.SetTopMargin(cfg['top_margin'])

        canvas.SetTickx(1)
        canvas.SetTicky(1)
        ROOT.gStyle.SetOptStat(0)

        canvas.cd()
        canvas.SetLogx(logx)
        canvas.SetLogy(logy)
        canvas.SetLogz(logz)

        self.canvas = canvas
        return canvas

    def _initialize_axis(self) -> None:
        """Apply ranges and titles directly to the histogram."""
        hist = self.hist
        ranges = self.axis_config['ranges']
        labels = self.axis_config['labels']
        offsets = self.axis_config['label_offsets']

        for axis, (low, up) in ((hist.GetXaxis(), ranges['x']), (hist.GetYaxis(), ranges['y'])):
            if low is not None or up is not None:
                axis.SetRangeUser(axis.GetXmin() if low is None else low,
                                  axis.GetXmax() if up is None else up)

        # Only touch the z axis if it was changed from the default
        zlow, zup = ranges['z']
        if (zlow, zup) != DEFAULT_Z_RANGE and zlow is not None and zup is not None:
            hist.GetZaxis().SetRangeUser(zlow, zup)

        hist.SetStats(0)
        hist.SetTitle("")
        hist.GetXaxis().SetTitle(labels['x'])
        hist.GetYaxis().SetTitle(labels['y'])
        hist.GetXaxis().SetTitleFont(62)
        hist.GetYaxis().SetTitleFont(62)
        hist.GetXaxis().SetTitleOffset(offsets['x'])
        hist.GetYaxis().SetTitleOffset(offsets['y'])
