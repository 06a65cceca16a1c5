#!/usr/bin/env python3
"""
Reading histograms from ROOT files.

Files are read with uproot and the contents are copied into fresh ROOT
histograms, so the plotters never depend on an open TFile.
"""

from typing import List, Optional

import numpy as np
import ROOT
import uproot


def histogram_from_arrays(values: np.ndarray, edges: np.ndarray,
                          errors: Optional[np.ndarray] = None,
                          name: str = "h", title: str = "") -> ROOT.TH1D:
    """
    Create a ROOT histogram from bin contents and bin edges.

    Args:
        values: Bin contents (n bins)
        edges: Bin edges (n + 1 values, variable binning allowed)
        errors: Bin errors, None keeps ROOT's default sqrt(content)
        name: Histogram name
        title: Histogram title

    Returns:
        ROOT.TH1D not attached to any directory
    """
    values = np.asarray(values, dtype=float)
    edges = np.asarray(edges, dtype=float)
    if len(edges) != len(values) + 1:
        raise ValueError(f"Expected {len(values) + 1} bin edges, got {len(edges)}")

    hist = ROOT.TH1D(name, title, len(values), edges)
    hist.SetDirectory(0)

    for i, value in enumerate(values):
        hist.SetBinContent(i + 1, float(value))
        if errors is not None:
            hist.SetBinError(i + 1, float(errors[i]))

    return hist


def histogram2d_from_arrays(values: np.ndarray, xedges: np.ndarray, yedges: np.ndarray,
                            errors: Optional[np.ndarray] = None,
                            name: str = "h2", title: str = "") -> ROOT.TH2D:
    """Create a ROOT TH2D; values are indexed [x, y]."""
    values = np.asarray(values, dtype=float)
    xedges = np.asarray(xedges, dtype=float)
    yedges = np.asarray(yedges, dtype=float)
    nx, ny = values.shape
    if len(xedges) != nx + 1 or len(yedges) != ny + 1:
        raise ValueError(f"Bin edges do not match a {nx}x{ny} histogram")

    hist = ROOT.TH2D(name, title, nx, xedges, ny, yedges)
    hist.SetDirectory(0)

    for ix in range(nx):
        for iy in range(ny):
            hist.SetBinContent(ix + 1, iy + 1, float(values[ix, iy]))
            if errors is not None:
                hist.SetBinError(ix + 1, iy + 1, float(errors[ix, iy]))

    return hist


def list_histograms(file_path: str, dimension: Optional[int] = None) -> List[str]:
    """
    Keys of all 1D/2D histograms in a file (including subdirectories).

    Args:
        file_path: Path to ROOT file
        dimension: 1 or 2 to keep only TH1 or TH2 objects

    Returns:
        List of keys without cycle numbers
    """
    with uproot.open(file_path) as file:
        classnames = file.classnames(cycle=False)

    keys = []
    for key, classname in classnames.items():
        if not classname.startswith(("TH1", "TH2")):
            continue
        if dimension is not None and not classname.startswith(f"TH{dimension}"):
            continue
        keys.append(key)

    return keys


def _axis_title(hist, axis: str) -> str:
    return str(hist.member(f"f{axis}axis").member("fTitle"))


def load_histogram(file_path: str, key: str, name: Optional[str] = None) -> ROOT.TH1:
    """
    Load a TH1 or TH2 from a ROOT file as a ROOT TH1D / TH2D.

    Args:
        file_path: Path to ROOT file
        key: Object key inside the file ('dir/name' for subdirectories)
        name: Name of the new histogram (default: last part of the key)

    Returns:
        ROOT.TH1D or ROOT.TH2D with contents, errors and axis titles
    """
    if name is None:
        name = key.split(";")[0].split("/")[-1]

    with uproot.open(file_path) as file:
        try:
            obj = file[key]
        except uproot.KeyInFileError as e:
            raise KeyError(f"Histogram '{key}' not found in {file_path}") from e

        classname = obj.classname
        if not classname.startswith(("TH1", "TH2")):
            raise ValueError(f"'{key}' in {file_path} is a {classname}, not a histogram")

        title = str(obj.member("fTitle"))

        if classname.startswith("TH1"):
            values, edges = obj.to_numpy()
            errors = np.sqrt(np.clip(obj.variances(), 0, None))
            hist = histogram_from_arrays(values, edges, errors, name, title)
        else:
            values, xedges, yedges = obj.to_numpy()
            errors = np.sqrt(np.clip(obj.variances(), 0, None))
            hist = histogram2d_from_arrays(values, xedges, yedges, errors, name, title)

        hist.GetXaxis().SetTitle(_axis_title(obj, "X"))
        hist.GetYaxis().SetTitle(_axis_title(obj, "Y"))

    return hist
