"""Tests for PNG chart export."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("matplotlib")

from grid_stress.data.models import ForecastResult, StressResult  # noqa: E402
from grid_stress.reporting.charts import ChartGenerator  # noqa: E402


class TestChartGenerator:
    def test_generate_all_keys(
        self, heat_wave_result: StressResult, heat_wave_forecast: ForecastResult
    ):
        import matplotlib.pyplot as plt

        figures = ChartGenerator(heat_wave_result, heat_wave_forecast).generate_all()
        assert set(figures) == {"stress_gauge", "forecast", "breakdown"}
        for fig in figures.values():
            plt.close(fig)

    def test_save_all(
        self,
        tmp_path: Path,
        heat_wave_result: StressResult,
        heat_wave_forecast: ForecastResult,
    ):
        out = tmp_path / "charts"
        paths = ChartGenerator(heat_wave_result, heat_wave_forecast).save_all(str(out))
        assert set(paths) == {"stress_gauge", "forecast", "breakdown"}
        for path in paths.values():
            p = Path(path)
            assert p.is_absolute()
            assert p.exists()
            assert p.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
