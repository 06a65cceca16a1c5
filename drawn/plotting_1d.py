#!/usr/bin/env python3
"""
Plotting1D - overlay of 1D histograms, graphs and functions on one canvas.

Usage:
    plotter = Plotting1D()
    plotter.new_hist(h_data, "Data")
    plotter.new_hist(h_mc, "Simulation", opt="l")
    plotter.set_axis_label("p_{T} (GeV/#it{c})", "Counts")
    plotter.plot("spectrum.pdf", logy=True)
"""

import ROOT

from .options import function_legend_option, graph_line_style, legend_draw_option
from .plotting import Plotting
from .style import AUTO, apply_style, auto_color, auto_marker_style


class Plotting1D(Plotting):

    def new_hist(self, hist: ROOT.TH1, label: str = "", style: int = AUTO, size: int = 1,
                 color: int = AUTO, opt: str = "p") -> ROOT.TH1:
        """
        Add a histogram that is drawn when calling plot().

        Args:
            hist: 1D histogram (TH1F, TH1D, ...)
            label: Legend label, empty keeps it out of the legend
            style: Marker style (and line style for 'hist' drawing), AUTO cycles
            size: Marker size and line width
            color: ROOT color, AUTO cycles
            opt: Draw option ('p', 'l', 'c', 'hist', 'E1', ...)

        Returns:
            The styled histogram
        """
        self._add_histogram(self.hists, hist, label, style, size, color, opt,
                            self.counter, "new_hist")
        self.counter += 1  # next object gets different colors and styles
        return hist

    def new_func(self, func: ROOT.TF1, label: str = "", style: int = AUTO, size: int = 1,
                 color: int = AUTO, opt: str = "l") -> ROOT.TF1:
        """Add a function; style sets both marker and line style."""
        return self._add_function(self.funcs, func, label, style, size, color, opt, "new_func")

    def new_graph(self, graph: ROOT.TGraph, label: str = "", style: int = AUTO, size: int = 1,
                  color: int = AUTO, opt: str = "p") -> ROOT.TGraph:
        """Add a graph (TGraph, TGraphErrors, ...) drawn on top of the axis."""
        self._check_input(graph, ROOT.TGraph, "new_graph")

        apply_style(graph,
                    auto_marker_style(self.counter) if style == AUTO else style,
                    graph_line_style(opt, style),
                    auto_color(self.counter) if color == AUTO else color,
                    size)
        self.graphs.append({'object': graph, 'label': label, 'option': opt})

        self.counter += 1
        return graph

    def set_axis_label(self, labelx: str = "", labely: str = "",
                       offsetx: float = 1., offsety: float = 1.) -> None:
        self.axis_config['labels'].update({'x': labelx, 'y': labely})
        self.axis_config['label_offsets'] = {'x': offsetx, 'y': offsety}

    def plot(self, name: str = "dummy.pdf", logx: bool = False,
             logy: bool = False) -> ROOT.TCanvas:
        """
        Draw everything that was added and save it.

        Args:
            name: Output file, the extension selects the format
            logx: Logarithmic x axis
            logy: Logarithmic y axis

        Returns:
            The canvas that was saved
        """
        if not self.hists and not self.graphs and not self.funcs:
            raise ValueError("No histograms added for plotting.")

        canvas = self._initialize_canvas(name, logx, logy)
        self._initialize_axis(logy).Draw()
        legend = self._initialize_legend()

        for entry in self.lines:
            entry['object'].Draw("same")
        for line in self.curly_lines:
            line.Draw("same")

        self._draw_entries(self.graphs)

        self._draw_entries(self.hists)
        self._add_legend_entries(legend, self.hists, legend_draw_option)
        self._add_legend_entries(legend, self.graphs, legend_draw_option)

        self._draw_entries(self.funcs)
        self._add_legend_entries(legend, self.funcs, function_legend_option)

        self._add_legend_entries(legend, self.lines, lambda opt: "l")

        for latex in self.latex:
            latex.Draw("same")

        legend.Draw("same")
        self._save(canvas, name)
        return canvas

    def _initialize_canvas(self, name: str, logx: bool, logy: bool) -> ROOT.TCanvas:
        cfg = self.canvas_config

        canvas = ROOT.TCanvas(self._canvas_name(name), "", cfg['width'], cfg['height'])
        canvas.SetLeftMargin(cfg['left_margin'])
        canvas.SetRightMargin(cfg['right_margin'])
        canvas.SetBottomMargin(cfg['bottom_margin'])
        canvas.SetTopMargin(cfg['top_margin'])

        # Ticks on every edge of the frame (also right and top)
        canvas.SetTickx(1)
        canvas.SetTicky(1)

        canvas.cd()
        canvas.SetLogx(logx)
        canvas.SetLogy(logy)

        self.canvas = canvas
        return canvas

    def _initialize_axis(self, logy: bool) -> ROOT.TH2D:
        """Empty histogram carrying axis ranges and titles, drawn first."""
        (xlow, xup), (ylow, yup) = self._auto_axis_ranges(logy)
        labels = self.axis_config['labels']
        offsets = self.axis_config['label_offsets']

        axis_hist = ROOT.TH2D(f"{self.canvas.GetName()}_axis", "", 1000, xlow, xup, 1000, ylow, yup)
        axis_hist.SetDirectory(0)
        axis_hist.SetStats(0)

        axis_hist.GetXaxis().SetTitle(labels['x'])
        axis_hist.GetYaxis().SetTitle(labels['y'])
        axis_hist.GetXaxis().SetTitleFont(62)
        axis_hist.GetYaxis().SetTitleFont(62)
        axis_hist.GetXaxis().SetTitleOffset(offsets['x'])
        axis_hist.GetYaxis().SetTitleOffset(offsets['y'])
        axis_hist.GetYaxis().SetMaxDigits(3)

        self.axis_hist = axis_hist
        return axis_hist
