"""Tests for core Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grid_stress.data.models import (
    Advisory,
    EVAdoption,
    ForecastResult,
    HourlyStress,
    StressInput,
    StressLevel,
)


class TestStressInput:
    """Tests for StressInput aliases, defaults and looseness."""

    def test_defaults(self):
        inp = StressInput()
        assert inp.temperature == 72.0
        assert inp.humidity == 50.0
        assert inp.ev_adoption == "medium"

    def test_camel_case_aliases(self):
        inp = StressInput.model_validate(
            {"dayOfWeek": 1, "windSpeed": 12, "cloudCover": 40, "evAdoption": "high"}
        )
        assert inp.day_of_week == 1
        assert inp.wind_speed == 12
        assert inp.cloud_cover == 40
        assert inp.ev_adoption == "high"

    def test_snake_case_names(self):
        inp = StressInput(day_of_week=6, wind_speed=3.5, cloud_cover=90, ev_adoption="low")
        assert inp.day_of_week == 6
        assert inp.wind_speed == 3.5

    def test_dump_by_alias(self):
        dumped = StressInput().model_dump(by_alias=True)
        assert set(dumped) == {
            "temperature", "humidity", "hour", "dayOfWeek",
            "windSpeed", "cloudCover", "evAdoption",
        }

    def test_out_of_range_values_accepted(self):
        inp = StressInput(temperature=-60, humidity=140, hour=30, day_of_week=9, wind_speed=-5)
        assert inp.hour == 30
        assert inp.humidity == 140

    def test_unknown_ev_adoption_accepted(self):
        assert StressInput(ev_adoption="extreme").ev_adoption == "extreme"

    def test_frozen(self):
        inp = StressInput()
        with pytest.raises(ValidationError):
            inp.temperature = 100

    def test_at_hour_replaces_only_hour(self):
        inp = StressInput(temperature=90, hour=3)
        moved = inp.at_hour(17)
        assert moved.hour == 17
        assert moved.temperature == 90
        assert inp.hour == 3

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            StressInput.model_validate({"temperature": "hot"})


class TestStressLevel:
    """Tests for level labels and colors."""

    @pytest.mark.parametrize("level, label, color", [
        (StressLevel.low, "Low", "#22c55e"),
        (StressLevel.moderate, "Moderate", "#eab308"),
        (StressLevel.high, "High", "#f97316"),
        (StressLevel.critical, "Critical", "#ef4444"),
    ])
    def test_label_and_color(self, level: StressLevel, label: str, color: str):
        assert level.label == label
        assert level.color == color

    def test_every_level_has_terminal_style(self):
        for level in StressLevel:
            assert level.style

    def test_ev_adoption_values(self):
        assert [a.value for a in EVAdoption] == ["low", "medium", "high"]


class TestForecastResult:
    """Tests for ForecastResult computed fields."""

    def _make(self, scores: list[int]) -> ForecastResult:
        return ForecastResult(
            input=StressInput(),
            hours=[
                HourlyStress(hour=h, score=s, level=StressLevel.low)
                for h, s in enumerate(scores)
            ],
        )

    def test_scores(self):
        scores = list(range(24))
        assert self._make(scores).scores == scores

    def test_peak_is_earliest_max(self):
        scores = [10] * 24
        scores[9] = 50
        scores[18] = 50
        result = self._make(scores)
        assert result.peak_hour == 9
        assert result.peak_score == 50

    def test_mean_score(self):
        assert self._make([12] * 24).mean_score == 12.0

    def test_requires_24_hours(self):
        with pytest.raises(ValidationError):
            self._make([10] * 23)


class TestAdvisory:
    def test_urgency_pattern(self):
        with pytest.raises(ValidationError):
            Advisory(
                rank=1, title="t", description="d",
                category="c", urgency="extreme", trigger="x",
            )
