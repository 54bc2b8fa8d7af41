"""Matplotlib chart generators for grid stress exports.

This module provides a ``ChartGenerator`` class that turns a
``StressResult`` and its ``ForecastResult`` into Matplotlib figures
that can be saved as standalone PNG images.

The Agg (Anti-Grain Geometry) backend is selected unconditionally so that
chart rendering works in headless / server environments without a display.
"""

from __future__ import annotations

import logging
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from grid_stress.data.models import ForecastResult, StressLevel, StressResult  # noqa: E402
from grid_stress.reporting.ascii_charts import format_hour  # noqa: E402
from grid_stress.scoring.thresholds import (  # noqa: E402
    CRITICAL_MIN,
    HIGH_MIN,
    MODERATE_MIN,
)
from grid_stress.scoring.weights import COMPONENT_NAMES  # noqa: E402

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Style / palette constants
# ---------------------------------------------------------------------------

_STYLE_CANDIDATES = ["seaborn-v0_8-whitegrid", "seaborn-whitegrid"]

_RELIEF = "#06b6d4"
_LOAD = "#8b5cf6"
_TRACK = "#1e2535"

_DPI = 150


def _apply_style() -> None:
    """Apply the best available Matplotlib style."""
    for style in _STYLE_CANDIDATES:
        if style in plt.style.available:
            plt.style.use(style)
            return
    # Fallback: use default style (no-op)


_apply_style()


# ---------------------------------------------------------------------------
# ChartGenerator
# ---------------------------------------------------------------------------


class ChartGenerator:
    """Generate the charts for a stress evaluation.

    Parameters
    ----------
    result:
        The scored conditions.
    forecast:
        The 24-hour profile for the same conditions.
    """

    def __init__(self, result: StressResult, forecast: ForecastResult) -> None:
        self.result = result
        self.forecast = forecast

    # -- 1. Forecast bar chart --------------------------------------------

    def forecast_chart(self) -> Figure:
        """Hourly stress bars colored by severity, current hour outlined."""
        hours = np.arange(24)
        scores = np.array(self.forecast.scores)
        colors = [h.level.color for h in self.forecast.hours]

        fig, ax = plt.subplots(figsize=(12, 5), dpi=_DPI)
        bars = ax.bar(hours, scores, color=colors, width=0.8, edgecolor="white")

        current = self.forecast.input.hour
        if 0 <= current < 24:
            bars[current].set_edgecolor("black")
            bars[current].set_linewidth(2.0)

        for threshold in (MODERATE_MIN, HIGH_MIN, CRITICAL_MIN):
            ax.axhline(threshold, color="grey", linestyle="--", linewidth=0.8, alpha=0.6)

        ax.set_xticks(hours[::3])
        ax.set_xticklabels([format_hour(int(h)) for h in hours[::3]])
        ax.set_xlim(-0.6, 23.6)
        ax.set_ylim(0, 100)
        ax.set_ylabel("Stress index")
        ax.set_title(
            "24-Hour Grid Stress Forecast (weather held constant)",
            fontsize=14,
            fontweight="bold",
        )
        ax.legend(
            handles=[Patch(color=level.color, label=level.label) for level in StressLevel],
            loc="upper left",
            fontsize=9,
        )

        fig.tight_layout()
        return fig

    # -- 2. Component breakdown -------------------------------------------

    def breakdown_chart(self) -> Figure:
        """Horizontal bars for each component; relief drawn left of zero."""
        components = self.result.breakdown.components()
        labels = [COMPONENT_NAMES[key] for key in components]
        values = np.array(list(components.values()))
        colors = [_RELIEF if v < 0 else _LOAD for v in values]

        fig, ax = plt.subplots(figsize=(9, 5), dpi=_DPI)
        y = np.arange(len(labels))
        ax.barh(y, values, color=colors)
        ax.axvline(0, color="black", linewidth=0.8)
        ax.set_yticks(y)
        ax.set_yticklabels(labels)
        ax.invert_yaxis()

        for pos, value in zip(y, values):
            ax.annotate(
                f"{value:+.1f}",
                xy=(value, pos),
                xytext=(4 if value >= 0 else -4, 0),
                textcoords="offset points",
                ha="left" if value >= 0 else "right",
                va="center",
                fontsize=9,
            )

        level = self.result.level
        ax.set_title(
            f"Stress Components - score {self.result.score}/100 ({level.label})",
            fontsize=14,
            fontweight="bold",
            color=level.color,
        )
        ax.set_xlabel("Points")

        fig.tight_layout()
        return fig

    # -- 3. Gauge ---------------------------------------------------------

    def gauge_chart(self) -> Figure:
        """Semicircular gauge filled to the score."""
        score = self.result.score
        level = self.result.level

        fig, ax = plt.subplots(figsize=(6, 3.6), dpi=_DPI)
        theta_track = np.linspace(np.pi, 0, 200)
        ax.plot(np.cos(theta_track), np.sin(theta_track), color=_TRACK,
                linewidth=18, solid_capstyle="round")

        if score > 0:
            theta_fill = np.linspace(np.pi, np.pi * (1 - score / 100), 200)
            ax.plot(np.cos(theta_fill), np.sin(theta_fill), color=level.color,
                    linewidth=18, solid_capstyle="round")

        ax.text(0, 0.25, f"{score}", ha="center", va="center",
                fontsize=40, fontweight="bold", color=level.color)
        ax.text(0, -0.05, level.label.upper(), ha="center", va="center",
                fontsize=11, color="#4b5563")
        ax.text(-1, -0.2, "0", ha="center", fontsize=9, color="#374151")
        ax.text(1, -0.2, "100", ha="center", fontsize=9, color="#374151")

        ax.set_xlim(-1.25, 1.25)
        ax.set_ylim(-0.3, 1.25)
        ax.set_aspect("equal")
        ax.axis("off")

        fig.tight_layout()
        return fig

    # -- Batch ------------------------------------------------------------

    def generate_all(self) -> dict[str, Figure]:
        """Generate all charts and return as a name -> figure dict."""
        return {
            "stress_gauge": self.gauge_chart(),
            "forecast": self.forecast_chart(),
            "breakdown": self.breakdown_chart(),
        }

    def save_all(self, output_dir: str) -> dict[str, str]:
        """Save all charts as PNG files.

        Parameters
        ----------
        output_dir:
            Directory where PNG files will be written. Created if it does
            not already exist.

        Returns
        -------
        dict[str, str]
            Mapping of chart name to the absolute file path of the saved PNG.
        """
        os.makedirs(output_dir, exist_ok=True)
        paths: dict[str, str] = {}
        for name, fig in self.generate_all().items():
            filepath = os.path.join(output_dir, f"{name}.png")
            fig.savefig(filepath, dpi=_DPI, bbox_inches="tight", facecolor="white")
            plt.close(fig)
            paths[name] = os.path.abspath(filepath)
            logger.info("Saved %s chart to %s", name, filepath)
        return paths
