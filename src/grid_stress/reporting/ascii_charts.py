# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Terminal-friendly visualizations using Unicode characters.

These functions return Rich-markup strings that render as the stress
gauge, the 24-hour forecast strip and component bars in the terminal
via the Rich library.
"""

from __future__ import annotations

from typing import Sequence

from grid_stress.scoring.thresholds import score_to_level

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_BLOCKS = " ▁▂▃▄▅▆▇█"


def format_hour(hour: int) -> str:
    """Format a 0-23 hour as ``12am``, ``9am``, ``12pm``, ``5pm`` etc."""
    if hour == 0:
        return "12am"
    if hour < 12:
        return f"{hour}am"
    if hour == 12:
        return "12pm"
    return f"{hour - 12}pm"


def day_name(day_of_week: int) -> str:
    """Name for a 0-6 day index (0 = Sunday); out-of-range values are shown raw."""
    if 0 <= day_of_week < len(DAY_NAMES):
        return DAY_NAMES[day_of_week]
    return f"day {day_of_week}"


def stress_gauge(score: float, width: int = 30) -> str:
    """Large visual gauge colored by severity level.

    Returns something like: [red]████████████████████████░░░░░░[/] 86/100 [red]CRITICAL[/]
    """
    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    empty = width - filled
    level = score_to_level(clamped)
    color = level.style

    bar = "█" * filled + "░" * empty
    return f"[{color}]{bar}[/] {clamped:.0f}/100 [bold {color}]{level.label.upper()}[/]"


def mini_gauge(score: float, width: int = 10) -> str:
    """Compact gauge for inline use in tables."""
    clamped = max(0.0, min(100.0, score))
    filled = int(clamped / 100 * width)
    empty = width - filled
    color = score_to_level(clamped).style

    bar = "█" * filled + "░" * empty
    return f"[{color}]{bar}[/] {clamped:.0f}"


def component_bar(value: float, max_value: float, width: int = 20) -> str:
    """Bar for one component; negative values (relief) render in cyan."""
    if max_value <= 0:
        return "[dim]n/a[/]"
    ratio = min(abs(value) / max_value, 1.0)
    filled = int(ratio * width)
    color = "cyan" if value < 0 else "magenta"
    bar = "█" * filled + "░" * (width - filled)
    return f"[{color}]{bar}[/]"


def forecast_strip(scores: Sequence[int], current_hour: int | None = None) -> str:
    """One block per hour, height and color from the score.

    Heights use a fixed 0-100 scale so strips for different conditions
    are comparable.  The current hour, when given, is underlined.
    """
    parts = []
    for hour, score in enumerate(scores):
        clamped = max(0, min(100, score))
        block = _BLOCKS[round(clamped / 100 * 8)]
        style = score_to_level(clamped).style
        if hour == current_hour:
            style = f"{style} underline"
        parts.append(f"[{style}]{block}[/]")
    return "".join(parts)


def hour_axis(hours: int = 24, every: int = 6) -> str:
    """Axis labels under a forecast strip, one label every *every* hours."""
    axis = [" "] * hours
    for hour in range(0, hours, every):
        label = format_hour(hour)
        for offset, char in enumerate(label):
            if hour + offset < hours:
                axis[hour + offset] = char
    return "".join(axis)


def sparkline(values: list[float], width: int | None = None) -> str:
    """Render a sparkline using Unicode block characters.

    Each value maps to one of 9 block heights: \" ▁▂▃▄▅▆▇█\"
    If width is given and len(values) > width, values are downsampled.
    """
    if not values:
        return ""

    if width and len(values) > width:
        step = len(values) / width
        sampled = []
        for i in range(width):
            start = int(i * step)
            end = int((i + 1) * step)
            sampled.append(sum(values[start:end]) / (end - start))
        values = sampled

    min_v = min(values)
    max_v = max(values)
    range_v = max_v - min_v or 1

    return "".join(
        _BLOCKS[int((v - min_v) / range_v * 8)] for v in values
    )
