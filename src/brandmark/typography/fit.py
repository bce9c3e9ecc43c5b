"""Fit engine — largest font size that fits a pixel budget.

Both searches are plain binary searches over integer sizes, so they finish
in O(log range) measurements regardless of the input.

INVARIANT: ``fit_to_width`` never raises and never returns NaN; when even
the minimum size overflows it scales down linearly, floored at
:data:`HARD_MIN_SIZE`.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from brandmark.typography.runs import TextStyle, measure_run_width

if TYPE_CHECKING:
    from brandmark.typography.metrics import TextMeasurer

HARD_MIN_SIZE = 40
LETTER_MIN_SIZE = 8
LETTER_SEARCH_FACTOR = 3
LETTER_HEADROOM = 1.04


def fit_to_width(
    text: str,
    style: TextStyle,
    max_width: float,
    min_size: int,
    max_size: int,
    measurer: TextMeasurer,
) -> int:
    """Return the largest size in ``[min_size, max_size]`` whose run fits *max_width*.

    Args:
        text: The run to fit; small caps and tracking come from *style*.
        style: Template style; its ``size`` is ignored.
        max_width: Width budget in pixels.
        min_size: Smallest size worth searching.
        max_size: Largest size allowed.
        measurer: Text metrics backend.
    """
    if not text:
        return min_size

    lo, hi = min_size, max_size
    best: int | None = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if measure_run_width(text, style.at_size(mid), measurer) <= max_width:
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    if best is not None:
        return best

    width_at_min = measure_run_width(text, style.at_size(min_size), measurer)
    if not math.isfinite(width_at_min) or width_at_min <= 0:
        return min_size
    return max(HARD_MIN_SIZE, math.floor(min_size * max_width / width_at_min))


def fit_letter_size(
    letter: str,
    max_width: float,
    max_height: float,
    box_height: float,
    measurer: TextMeasurer,
    *,
    weight: int = 900,
) -> int:
    """Largest size at which *letter* fits the box, plus 4% headroom."""
    lo, hi = LETTER_MIN_SIZE, int(box_height * LETTER_SEARCH_FACTOR)
    best = LETTER_MIN_SIZE
    while lo <= hi:
        mid = (lo + hi) // 2
        m = measurer.measure(letter, mid, weight)
        if m.width <= max_width and m.height <= max_height:
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return math.floor(best * LETTER_HEADROOM)
