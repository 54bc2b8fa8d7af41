# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Piecewise-linear helpers shared by the component scorers."""

from __future__ import annotations

import math
from typing import Sequence


def clamp(value: float, low: float, high: float) -> float:
    """Constrain *value* to ``[low, high]``."""
    return max(low, min(high, value))


def lerp(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> float:
    """Map *value* from ``[in_min, in_max]`` onto ``[out_min, out_max]``.

    The interpolation factor is clamped to ``[0, 1]``, so values outside
    the source range hold at the nearest endpoint instead of being
    extrapolated.
    """
    t = clamp((value - in_min) / (in_max - in_min), 0.0, 1.0)
    return out_min + t * (out_max - out_min)


def lerp_range(value: float, mapping: tuple[float, float, float, float]) -> float:
    """:func:`lerp` with the four range bounds packed in a tuple."""
    return lerp(value, *mapping)


def interpolate_anchors(x: float, anchors: Sequence[tuple[float, float]]) -> float:
    """Interpolate *x* across consecutive ``(x, y)`` anchor points.

    The first half-open segment ``[x0, x1)`` containing *x* is used.
    Anything not covered by a segment (at or past the last anchor, or
    before the first) takes the last anchor's value.
    """
    for (x0, y0), (x1, y1) in zip(anchors, anchors[1:]):
        if x0 <= x < x1:
            return lerp(x, x0, x1, y0, y1)
    return anchors[-1][1]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Python's :func:`round` uses banker's rounding; stress scores round
    ``42.5`` to ``43`` so that results agree with other implementations.
    """
    return int(math.floor(value + 0.5))
