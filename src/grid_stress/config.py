# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Scenario file model and YAML/JSON loader.

A scenario file holds optional ``defaults`` applied beneath every
scenario, plus a mapping of named scenarios.  Each scenario lists only
the fields it overrides and may carry a ``description``::

    defaults:
      humidity: 55
      evAdoption: high
    scenarios:
      august_peak:
        description: Late-August heat dome
        temperature: 104
        hour: 17
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from grid_stress.data.models import StressInput
from grid_stress.data.scenarios import Scenario

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}

# Field names plus their camelCase aliases
_INPUT_KEYS = frozenset(StressInput.model_fields) | frozenset(
    field.alias for field in StressInput.model_fields.values() if field.alias
)


def _check_keys(raw: dict[str, Any], where: str, allowed: frozenset[str] = _INPUT_KEYS) -> None:
    unknown = set(raw) - allowed
    if unknown:
        raise ValueError(
            f"Unknown condition key(s) in {where}: {', '.join(sorted(unknown))}"
        )


class ScenarioFile(BaseModel):
    """Top-level scenario file contents."""

    defaults: dict[str, Any] = Field(
        default_factory=dict,
        description="Condition fields applied beneath every scenario",
    )
    scenarios: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Named scenarios, each listing the fields it overrides",
    )

    @field_validator("defaults")
    @classmethod
    def known_default_keys(cls, v: dict[str, Any]) -> dict[str, Any]:
        _check_keys(v, "defaults")
        return v

    @field_validator("scenarios")
    @classmethod
    def known_scenario_keys(cls, v: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        for name, raw in v.items():
            _check_keys(raw, f"scenario '{name}'", _INPUT_KEYS | {"description"})
        return v

    def base_input(self) -> StressInput:
        """Conditions built from ``defaults`` alone."""
        return StressInput.model_validate(self.defaults)

    def resolve(self, name: str) -> Scenario:
        """Build the named scenario on top of the file defaults.

        Raises
        ------
        KeyError
            If *name* is not defined in the file.
        """
        try:
            raw = dict(self.scenarios[name])
        except KeyError:
            available = ", ".join(sorted(self.scenarios)) or "(none)"
            raise KeyError(
                f"Scenario '{name}' not found in file. Available scenarios: {available}"
            ) from None

        description = str(raw.pop("description", ""))
        overrides = StressInput.model_validate(raw)
        conditions = self.base_input().model_copy(
            update={f: getattr(overrides, f) for f in overrides.model_fields_set}
        )
        return Scenario(name=name, description=description, conditions=conditions)

    def to_scenarios(self) -> dict[str, Scenario]:
        """Resolve every scenario in file order."""
        return {name: self.resolve(name) for name in self.scenarios}


def load_scenario_file(path: str | Path) -> ScenarioFile:
    """Load and validate a scenario file (``.yaml``, ``.yml`` or ``.json``).

    Every scenario is resolved once during loading so that schema errors
    surface here rather than at first use.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Scenario file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in _YAML_SUFFIXES | _JSON_SUFFIXES:
        raise ValueError(
            f"Unsupported scenario file type '{file_path.suffix}'; "
            "use .yaml, .yml or .json"
        )

    with open(file_path) as f:
        try:
            raw = yaml.safe_load(f) if suffix in _YAML_SUFFIXES else json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ValueError(f"Invalid scenario file {file_path}: {exc}") from exc

    scenario_file = ScenarioFile.model_validate(raw or {})
    scenario_file.to_scenarios()
    logger.info(
        "Loaded %d scenario(s) from %s", len(scenario_file.scenarios), file_path
    )
    return scenario_file
