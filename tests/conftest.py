"""
Pytest configuration and fixtures for drawn tests.
"""

import numpy as np
import pytest


@pytest.fixture(scope="session", autouse=True)
def root_batch():
    """Run ROOT in batch mode and keep new histograms out of gDirectory."""
    ROOT = pytest.importorskip("ROOT")
    ROOT.gROOT.SetBatch(True)
    ROOT.TH1.AddDirectory(False)
    return ROOT


@pytest.fixture
def simple_hist(root_batch):
    """4 bins on [0, 4] with contents 1, 2, 3, 4."""
    hist = root_batch.TH1D("h_simple", "", 4, 0, 4)
    for i, value in enumerate([1, 2, 3, 4]):
        hist.SetBinContent(i + 1, value)
    return hist


@pytest.fixture
def hist_with_empty_bin(root_batch):
    """4 bins on [0, 4] with contents 0, 2, 4, 8."""
    hist = root_batch.TH1D("h_empty_bin", "", 4, 0, 4)
    for i, value in enumerate([0, 2, 4, 8]):
        hist.SetBinContent(i + 1, value)
    return hist


@pytest.fixture
def gaussian_hist(root_batch):
    """Histogram filled with a fixed-seed normal sample."""
    np.random.seed(42)
    hist = root_batch.TH1D("h_gauss", "", 20, -4, 4)
    for value in np.random.normal(0, 1, 1000):
        hist.Fill(value)
    return hist


@pytest.fixture
def gaussian_hist2d(root_batch):
    """2D histogram filled with a fixed-seed correlated normal sample."""
    np.random.seed(42)
    hist = root_batch.TH2D("h_gauss2d", "", 10, 0, 10, 10, 0, 10)
    x = np.random.normal(5, 2, 2000)
    y = x + np.random.normal(0, 1, 2000)
    for xi, yi in zip(x, y):
        hist.Fill(xi, yi)
    return hist


@pytest.fixture
def histogram_file(tmp_path):
    """ROOT file written with uproot holding two 1D, one 2D histogram and a string."""
    uproot = pytest.importorskip("uproot")
    np.random.seed(42)

    path = str(tmp_path / "histograms.root")
    edges = np.linspace(0, 10, 11)
    with uproot.recreate(path) as file:
        file["h_data"] = (np.array([5., 8., 12., 20., 25., 22., 15., 9., 4., 2.]), edges)
        file["h_mc"] = (np.array([4., 9., 13., 18., 27., 20., 16., 8., 5., 1.]), edges)
        file["h_2d"] = np.histogram2d(np.random.normal(5, 2, 500),
                                      np.random.normal(5, 2, 500),
                                      bins=[np.linspace(0, 10, 6), np.linspace(0, 10, 6)])
        file["note"] = "not a histogram"

    return path
