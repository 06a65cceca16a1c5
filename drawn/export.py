#!/usr/bin/env python3
"""
Writing finished canvases to disk.
"""

import os

import ROOT


def save_canvas(canvas: ROOT.TCanvas, output_path: str) -> str:
    """
    Save a canvas; the format follows the file extension.

    Args:
        canvas: Canvas to save
        output_path: Target file ('.root' writes the canvas object itself,
            everything else goes through TCanvas.SaveAs)

    Returns:
        The path that was written
    """
    dir_name = os.path.dirname(output_path)
    if dir_name:
        os.makedirs(dir_name, exist_ok=True)

    if output_path.endswith(".root"):
        root_file = ROOT.TFile(output_path, "RECREATE")
        canvas.Write()
        root_file.Close()
    else:
        canvas.SaveAs(output_path)

    return output_path

