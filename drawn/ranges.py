#!/usr/bin/env python3
"""
Axis-range estimation.

Plain arithmetic on the extrema of the objects that will be drawn. The
plotters collect minima and maxima from ROOT objects and hand them over
here, so the heuristic itself does not depend on ROOT.
"""

from typing import Iterable, Optional, Tuple

Range = Tuple[Optional[float], Optional[float]]


def pad_y_range(minimum: float, maximum: float, logy: bool = False) -> Tuple[float, float]:
    """
    Leave space between the lowest/highest bin and the axis borders.

    Args:
        minimum: Smallest value to show (positive for log scale)
        maximum: Largest value to show
        logy: Whether the y axis is logarithmic

    Returns:
        (lower, upper) axis edges
    """
    if logy:
        # A factor 2 is not much on a log scale
        return 0.5 * minimum, 2 * maximum

    upper = maximum + (maximum - minimum) / 10

    if upper - 2 * minimum > 0:
        # Minimum is small compared to the maximum: go down to zero
        lower = 0.0 if minimum > 0 else 1.1 * minimum
    else:
        # All bins rather full
        lower = minimum - (upper - minimum) / 8

    return lower, upper


def estimate_y_range(minima: Iterable[float], maxima: Iterable[float],
                     logy: bool = False) -> Tuple[float, float]:
    """
    Estimate the y range covering several objects.

    For a log axis only strictly positive minima are taken into account.
    """
    maxima = list(maxima)
    if not maxima:
        raise ValueError("Cannot estimate a y range without any maxima")
    maximum = max(maxima)

    if logy:
        positive = [m for m in minima if m > 0]
        if positive:
            minimum = min(positive)
        elif maximum > 0:
            minimum = maximum / 1000.
        else:
            minimum = 0.1
    else:
        minimum = min(minima)

    return pad_y_range(minimum, maximum, logy)


def estimate_ratio_range(minima: Iterable[float], maxima: Iterable[float]) -> Tuple[float, float]:
    """Ratios often start at 0, so the lower edge never exceeds 0."""
    maxima = list(maxima)
    if not maxima:
        raise ValueError("Cannot estimate a ratio range without any ratios")

    lower = min([0.0] + list(minima))
    upper = max(maxima)
    return lower, upper + (upper - lower) / 10


def resolve_range(user: Range, estimate: Tuple[float, float]) -> Tuple[float, float]:
    """Edges the user set win, unset (None) edges take the estimate."""
    low, up = user
    return (estimate[0] if low is None else low,
            estimate[1] if up is None else up)
