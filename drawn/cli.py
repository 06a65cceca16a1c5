#!/usr/bin/env python3
"""
Command line front end: plot histograms straight from ROOT files.
"""

import argparse
import os
import sys
from typing import List, Optional

from tqdm import tqdm

from .histogram_io import list_histograms, load_histogram
from .plotting_1d import Plotting1D
from .plotting_2d import Plotting2D
from .plotting_ratio import PlottingRatio, divide_histograms


def _labels_for(keys: List[str], labels: Optional[List[str]]) -> List[str]:
    """Custom labels where given, the histogram key otherwise."""
    labels = labels or []
    return [labels[i] if i < len(labels) else key for i, key in enumerate(keys)]


def _range_args(values: Optional[List[float]]):
    return (None, None) if values is None else tuple(values)


def run_hist1d(args) -> List[str]:
    plotter = Plotting1D()
    for key, label in zip(args.keys, _labels_for(args.keys, args.labels)):
        plotter.new_hist(load_histogram(args.file, key), label, opt=args.draw_option)

    xlow, xup = _range_args(args.xrange)
    ylow, yup = _range_args(args.yrange)
    plotter.set_axis_range(xlow, xup, ylow, yup)
    plotter.set_axis_label(args.xlabel, args.ylabel)
    plotter.set_legend(*args.legend)

    plotter.plot(args.output, logx=args.logx, logy=args.logy)
    return [args.output]


def run_hist2d(args) -> List[str]:
    plotter = Plotting2D()
    plotter.new_hist(load_histogram(args.file, args.key), opt=args.draw_option,
                     palette=args.palette)
    plotter.set_axis_label(args.xlabel, args.ylabel)
    plotter.set_margins(right=0.12)

    plotter.plot(args.output, logz=args.logz, numcontours=args.contours)
    return [args.output]


def run_ratio(args) -> List[str]:
    plotter = PlottingRatio()
    reference = load_histogram(args.file, args.reference)
    labels = _labels_for([args.reference] + args.keys, args.labels)

    plotter.new_hist(reference, labels[0])
    for key, label in zip(args.keys, labels[1:]):
        hist = load_histogram(args.file, key)
        plotter.new_hist(hist, label)
        plotter.new_ratio(divide_histograms(hist, reference, f"{hist.GetName()}_ratio"))

    rlow, rup = _range_args(args.ratio_range)
    plotter.set_axis_range(zlow=rlow, zup=rup)
    plotter.set_axis_label(args.xlabel, args.ylabel, args.ratio_label)
    xlow, xup = reference.GetXaxis().GetXmin(), reference.GetXaxis().GetXmax()
    plotter.new_line(xlow, 1., xup, 1., style=2)

    plotter.plot(args.output, logy=args.logy)
    return [args.output]


def run_batch(args) -> List[str]:
    keys = list_histograms(args.file, dimension=1)
    if not keys:
        raise ValueError(f"No 1D histograms found in {args.file}")

    written = []
    with tqdm(total=len(keys), desc="Plotting histograms", unit="plot") as pbar:
        for key in keys:
            plotter = Plotting1D()
            hist = load_histogram(args.file, key)
            plotter.new_hist(hist, opt=args.draw_option)
            plotter.set_axis_label(hist.GetXaxis().GetTitle(), hist.GetYaxis().GetTitle())

            output = os.path.join(args.output_dir, f"{key.replace('/', '_')}.{args.format}")
            plotter.plot(output, logy=args.logy)
            written.append(output)
            pbar.update(1)

    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drawn",
        description='Pre-styled ROOT plots of histograms stored in ROOT files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Overlay two histograms
  drawn hist1d input.root h_data h_mc --labels Data Simulation --logy --output spectrum.pdf

  # 2D histogram with logarithmic color scale
  drawn hist2d input.root h_correlation --logz --output correlation.png

  # Histograms with their ratio to a reference
  drawn ratio input.root h_data h_mc1 h_mc2 --ratio-label "MC/Data" --output ratio.pdf

  # Every 1D histogram of a file into a folder
  drawn batch input.root --output-dir plots --format png
        """)
    subparsers = parser.add_subparsers(dest='command', required=True)

    hist1d = subparsers.add_parser('hist1d', help='Overlay 1D histograms')
    hist1d.add_argument('file', type=str, help='Input ROOT file')
    hist1d.add_argument('keys', type=str, nargs='+', help='Histogram keys')
    hist1d.add_argument('--labels', type=str, nargs='+', help='Legend labels')
    hist1d.add_argument('--output', type=str, default='hist1d.pdf',
                        help='Output file (default: hist1d.pdf)')
    hist1d.add_argument('--logx', action='store_true', help='Logarithmic x axis')
    hist1d.add_argument('--logy', action='store_true', help='Logarithmic y axis')
    hist1d.add_argument('--xlabel', type=str, default='x', help='x axis title')
    hist1d.add_argument('--ylabel', type=str, default='y', help='y axis title')
    hist1d.add_argument('--xrange', type=float, nargs=2, metavar=('LOW', 'UP'),
                        help='x axis range (default: automatic)')
    hist1d.add_argument('--yrange', type=float, nargs=2, metavar=('LOW', 'UP'),
                        help='y axis range (default: automatic)')
    hist1d.add_argument('--legend', type=float, nargs=4, default=[0.15, 0.4, 0.7, 0.9],
                        metavar=('X1', 'X2', 'Y1', 'Y2'), help='Legend position (NDC)')
    hist1d.add_argument('--draw-option', type=str, default='p',
                        help='ROOT draw option (default: p)')
    hist1d.set_defaults(func=run_hist1d)

    hist2d = subparsers.add_parser('hist2d', help='Plot a 2D histogram')
    hist2d.add_argument('file', type=str, help='Input ROOT file')
    hist2d.add_argument('key', type=str, help='Histogram key')
    hist2d.add_argument('--output', type=str, default='hist2d.pdf',
                        help='Output file (default: hist2d.pdf)')
    hist2d.add_argument('--logz', action='store_true', help='Logarithmic color axis')
    hist2d.add_argument('--xlabel', type=str, default='x', help='x axis title')
    hist2d.add_argument('--ylabel', type=str, default='y', help='y axis title')
    hist2d.add_argument('--palette', type=int, default=57, help='ROOT palette (default: 57, kBird)')
    hist2d.add_argument('--contours', type=int, default=100, help='Number of color levels')
    hist2d.add_argument('--draw-option', type=str, default='COLZ',
                        help='ROOT draw option (default: COLZ)')
    hist2d.set_defaults(func=run_hist2d)

    ratio = subparsers.add_parser('ratio', help='Histograms with ratios to a reference')
    ratio.add_argument('file', type=str, help='Input ROOT file')
    ratio.add_argument('reference', type=str, help='Reference histogram key (denominator)')
    ratio.add_argument('keys', type=str, nargs='+', help='Histogram keys to compare')
    ratio.add_argument('--labels', type=str, nargs='+',
                       help='Legend labels, reference first')
    ratio.add_argument('--output', type=str, default='ratio.pdf',
                       help='Output file (default: ratio.pdf)')
    ratio.add_argument('--logy', action='store_true', help='Logarithmic y axis of the upper pad')
    ratio.add_argument('--xlabel', type=str, default='x', help='x axis title')
    ratio.add_argument('--ylabel', type=str, default='y', help='y axis title')
    ratio.add_argument('--ratio-label', type=str, default='Ratio', help='Ratio axis title')
    ratio.add_argument('--ratio-range', type=float, nargs=2, metavar=('LOW', 'UP'),
                       help='Ratio axis range (default: automatic)')
    ratio.set_defaults(func=run_ratio)

    batch = subparsers.add_parser('batch', help='Plot every 1D histogram of a file')
    batch.add_argument('file', type=str, help='Input ROOT file')
    batch.add_argument('--output-dir', type=str, default='plots',
                       help='Output folder (default: plots)')
    batch.add_argument('--format', type=str, default='pdf',
                       choices=['pdf', 'png', 'root', 'eps', 'svg'],
                       help='Output format (default: pdf)')
    batch.add_argument('--logy', action='store_true', help='Logarithmic y axis')
    batch.add_argument('--draw-option', type=str, default='hist',
                       help='ROOT draw option (default: hist)')
    batch.set_defaults(func=run_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    print(f"Starting drawn {args.command} on {args.file}")

    try:
        written = args.func(args)
    except (ValueError, KeyError, TypeError, OSError) as e:
        print(f"\nFAILED: {e}")
        return 1

    for path in written:
        print(f"  Saved: {path}")
    print(f"\nSUCCESS: {len(written)} plot(s) created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
