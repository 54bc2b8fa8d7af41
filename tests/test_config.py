# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for scenario file loading and resolution."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from grid_stress.config import ScenarioFile, load_scenario_file
from grid_stress.data.models import StressInput

YAML_CONTENT = """\
defaults:
  humidity: 55
  evAdoption: high
scenarios:
  august_peak:
    description: Late-August heat dome
    temperature: 104
    hour: 17
  quiet_night:
    temperature: 60
    hour: 2
    dayOfWeek: 0
    evAdoption: low
"""


@pytest.fixture()
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "scenarios.yaml"
    path.write_text(YAML_CONTENT)
    return path


class TestLoadScenarioFile:
    """Tests for load_scenario_file."""

    def test_yaml(self, yaml_file: Path):
        sf = load_scenario_file(yaml_file)
        assert isinstance(sf, ScenarioFile)
        assert list(sf.scenarios) == ["august_peak", "quiet_night"]

    def test_yml_suffix(self, tmp_path: Path):
        path = tmp_path / "scenarios.yml"
        path.write_text(YAML_CONTENT)
        assert "august_peak" in load_scenario_file(path).scenarios

    def test_json(self, tmp_path: Path):
        path = tmp_path / "scenarios.json"
        path.write_text(json.dumps({
            "scenarios": {"noon": {"temperature": 88, "cloudCover": 90, "hour": 13}},
        }))
        scenario = load_scenario_file(path).resolve("noon")
        assert scenario.conditions.temperature == 88
        assert scenario.conditions.cloud_cover == 90

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        sf = load_scenario_file(path)
        assert sf.scenarios == {}
        assert sf.base_input() == StressInput()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_scenario_file(tmp_path / "nope.yaml")

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "scenarios.toml"
        path.write_text("x = 1")
        with pytest.raises(ValueError, match="Unsupported"):
            load_scenario_file(path)

    def test_invalid_value_rejected_at_load(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("scenarios:\n  broken:\n    temperature: scorching\n")
        with pytest.raises(ValidationError):
            load_scenario_file(path)


class TestResolve:
    """Tests for merging defaults beneath scenario overrides."""

    def test_defaults_applied(self, yaml_file: Path):
        scenario = load_scenario_file(yaml_file).resolve("august_peak")
        assert scenario.name == "august_peak"
        assert scenario.description == "Late-August heat dome"
        assert scenario.conditions.temperature == 104
        assert scenario.conditions.hour == 17
        assert scenario.conditions.humidity == 55
        assert scenario.conditions.ev_adoption == "high"

    def test_unset_fields_fall_back_to_model_defaults(self, yaml_file: Path):
        scenario = load_scenario_file(yaml_file).resolve("august_peak")
        assert scenario.conditions.wind_speed == StressInput().wind_speed
        assert scenario.conditions.day_of_week == StressInput().day_of_week

    def test_override_beats_default(self, yaml_file: Path):
        scenario = load_scenario_file(yaml_file).resolve("quiet_night")
        assert scenario.conditions.ev_adoption == "low"
        assert scenario.conditions.day_of_week == 0
        assert scenario.description == ""

    def test_unknown_scenario(self, yaml_file: Path):
        with pytest.raises(KeyError, match="august_peak"):
            load_scenario_file(yaml_file).resolve("missing")

    def test_to_scenarios(self, yaml_file: Path):
        scenarios = load_scenario_file(yaml_file).to_scenarios()
        assert list(scenarios) == ["august_peak", "quiet_night"]
        assert scenarios["quiet_night"].conditions.temperature == 60


class TestScenarioFileErrors:
    """Tests for malformed files and unknown keys."""

    def test_malformed_yaml(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("scenarios: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid scenario file"):
            load_scenario_file(path)

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text('{"scenarios": {')
        with pytest.raises(ValueError, match="Invalid scenario file"):
            load_scenario_file(path)

    def test_misspelled_scenario_key(self, tmp_path: Path):
        path = tmp_path / "typo.yaml"
        path.write_text("scenarios:\n  hot:\n    temprature: 110\n")
        with pytest.raises(ValidationError, match="temprature"):
            load_scenario_file(path)

    def test_misspelled_default_key(self, tmp_path: Path):
        path = tmp_path / "typo.yaml"
        path.write_text("defaults:\n  windspeed: 20\nscenarios: {}\n")
        with pytest.raises(ValidationError, match="windspeed"):
            load_scenario_file(path)

    def test_description_only_allowed_in_scenarios(self):
        with pytest.raises(ValidationError, match="description"):
            ScenarioFile.model_validate({"defaults": {"description": "x"}})

    def test_snake_case_and_camel_case_keys_accepted(self):
        sf = ScenarioFile.model_validate({
            "defaults": {"wind_speed": 12},
            "scenarios": {"mixed": {"cloudCover": 70, "day_of_week": 5}},
        })
        conditions = sf.resolve("mixed").conditions
        assert conditions.wind_speed == 12
        assert conditions.cloud_cover == 70
        assert conditions.day_of_week == 5
