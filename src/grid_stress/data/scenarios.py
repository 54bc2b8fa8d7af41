"""Named scenario presets.

Each scenario pairs a set of conditions with a short description so the
CLI, API and tests can refer to representative situations by name.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from grid_stress.data.models import EVAdoption, StressInput


class Scenario(BaseModel):
    """A named, described set of conditions."""

    name: str = Field(description="Short identifier for the scenario")
    description: str = Field(description="Human-readable description of the scenario")
    conditions: StressInput = Field(description="Conditions to score")


# ---------------------------------------------------------------------------
# Scenario definitions
# ---------------------------------------------------------------------------

DEMO_DEFAULT = Scenario(
    name="demo_default",
    description=(
        "Mild Wednesday noon with a light breeze and medium EV adoption; "
        "the starting point for interactive exploration, with the clock "
        "pinned so it scores the same every run."
    ),
    conditions=StressInput(
        temperature=72,
        humidity=50,
        hour=12,
        day_of_week=3,
        wind_speed=8,
        cloud_cover=30,
        ev_adoption=EVAdoption.medium.value,
    ),
)

HEAT_WAVE = Scenario(
    name="heat_wave",
    description=(
        "Hot, nearly windless Tuesday at the 5pm evening peak in a region "
        "with high EV adoption."
    ),
    conditions=StressInput(
        temperature=102,
        humidity=45,
        hour=17,
        day_of_week=2,
        wind_speed=3,
        cloud_cover=10,
        ev_adoption=EVAdoption.high.value,
    ),
)

SPRING_MORNING = Scenario(
    name="spring_morning",
    description=(
        "Mild spring Sunday at 3am with a steady breeze and low EV adoption."
    ),
    conditions=StressInput(
        temperature=65,
        humidity=50,
        hour=3,
        day_of_week=0,
        wind_speed=10,
        cloud_cover=50,
        ev_adoption=EVAdoption.low.value,
    ),
)

WINTER_FREEZE = Scenario(
    name="winter_freeze",
    description=(
        "Overcast 10F Monday at 7am: heating load, weekend-depleted EVs "
        "and the morning preconditioning pulse stack up."
    ),
    conditions=StressInput(
        temperature=10,
        humidity=60,
        hour=7,
        day_of_week=1,
        wind_speed=5,
        cloud_cover=80,
        ev_adoption=EVAdoption.medium.value,
    ),
)

CLOUDY_SUMMER_NOON = Scenario(
    name="cloudy_summer_noon",
    description=(
        "Humid 90F Thursday at 1pm under heavy cloud, when solar supply "
        "is lost at the top of its curve."
    ),
    conditions=StressInput(
        temperature=90,
        humidity=75,
        hour=13,
        day_of_week=4,
        wind_speed=4,
        cloud_cover=95,
        ev_adoption=EVAdoption.medium.value,
    ),
)

WINDY_WEEKEND = Scenario(
    name="windy_weekend",
    description=(
        "Cool, gusty Saturday evening where strong wind supply offsets "
        "the evening demand peak."
    ),
    conditions=StressInput(
        temperature=55,
        humidity=40,
        hour=18,
        day_of_week=6,
        wind_speed=30,
        cloud_cover=60,
        ev_adoption=EVAdoption.high.value,
    ),
)


SCENARIOS: dict[str, Scenario] = {
    "demo_default": DEMO_DEFAULT,
    "heat_wave": HEAT_WAVE,
    "spring_morning": SPRING_MORNING,
    "winter_freeze": WINTER_FREEZE,
    "cloudy_summer_noon": CLOUDY_SUMMER_NOON,
    "windy_weekend": WINDY_WEEKEND,
}


def get_scenario(name: str) -> Scenario:
    """Return the scenario registered under *name*.

    Raises
    ------
    KeyError
        If *name* does not match any registered scenario.
    """
    try:
        return SCENARIOS[name]
    except KeyError:
        available = ", ".join(sorted(SCENARIOS.keys()))
        raise KeyError(
            f"Unknown scenario '{name}'. Available scenarios: {available}"
        ) from None
