#!/usr/bin/env python3
"""
Draw-option rules shared by all plotters.

ROOT draw options are plain strings ("p", "hist", "E1", ...). These helpers
translate what the user asked for into what ROOT needs for drawing and into
the matching legend symbol.
"""

from typing import List


def hist_draw_option(opt: str) -> str:
    """Lines and curves are only drawn as such with the 'hist' option."""
    if opt in ("l", "c"):
        return f"{opt} hist"
    return opt


def legend_draw_option(opt: str) -> str:
    """
    Convert a histogram draw option into a legend symbol option.

    Args:
        opt: Draw option the histogram is drawn with

    Returns:
        Legend option ('p', 'l', 'pE1', 'fpE1' or the draw option itself)
    """
    legend_opt = opt if opt else "p"

    if "h" in opt:
        legend_opt = "l"  # hist style gets a line in the legend
    if "E1" in opt:
        legend_opt = "pE1"
        if "f" in opt or "z" in opt:
            legend_opt = "fpE1"

    return legend_opt


def function_legend_option(opt: str) -> str:
    if "l" in opt or "hist" in opt or "C" in opt:
        return "l"
    return "p"


def ratio_legend_option(opt: str) -> str:
    if "l" in opt or "hist" in opt:
        return "l"
    return "p"


def hist_line_style(opt: str, style: int) -> int:
    """
    Line style for a histogram or graph.

    Without 'hist'-like drawing the only lines are error bars, which stay
    solid. Line styles of 10 and above are not valid ROOT line styles.
    """
    if "h" in opt and 0 < style < 10:
        return style
    return 1


def graph_line_style(opt: str, style: int) -> int:
    if "l" in opt and 0 < style < 10:
        return style
    return 1


def split_latex(text: str) -> List[str]:
    """Split a ';'-separated text into LaTeX lines, skipping empty pieces."""
    return [line for line in text.split(";") if line]
