#!/usr/bin/env python3
"""
PlottingPaint - sketches made of angles, lines, curly lines and text.

There is no axis and no legend: coordinates are the pad's own (0 to 1),
e.g. for drawing a particle decay with its opening angle.
"""

import ROOT

from .plotting import Plotting


class PlottingPaint(Plotting):
    def __init__(self, verbose: bool = False):
        super().__init__(verbose)
        self.angles = []

    def set_canvas(self, width: int = 1200, height: int = 1200) -> None:
        self.canvas_config.update({'width': width, 'height': height})

    def new_angle(self, x: float = 0.5, y: float = 0.5, r1: float = 0.3, r2: float = 0.2,
                  phimin: float = 60, phimax: float = 120, theta: float = 0) -> ROOT.TEllipse:
        """
        Add an incomplete ellipse, e.g. to mark a decay angle.

        Args:
            x, y: Center
            r1, r2: Radii
            phimin, phimax: Start and end of the arc in degrees
            theta: Rotation of the ellipse in degrees

        Returns:
            The TEllipse
        """
        angle = ROOT.TEllipse(x, y, r1, r2, phimin, phimax, theta)
        angle.SetNoEdges()
        self.angles.append(angle)
        return angle

    def plot(self, name: str = "dummy.pdf") -> ROOT.TCanvas:
        cfg = self.canvas_config

        canvas = ROOT.TCanvas(self._canvas_name(name), "", cfg['width'], cfg['height'])
        canvas.cd()
        self.canvas = canvas

        for angle in self.angles:
            angle.Draw("same")
        for entry in self.lines:
            entry['object'].Draw("same")
        for line in self.curly_lines:
            line.Draw("same")
        for latex in self.latex:
            latex.Draw("same")

        self._save(canvas, name)
        return canvas
