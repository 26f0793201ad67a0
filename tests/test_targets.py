"""Tests for calorie target calculations."""

import pytest

from vitalife.domain.targets import (
    basal_metabolic_rate,
    calorie_target,
    total_daily_energy_expenditure,
)
from tests.conftest import make_profile


def test_calorie_target_for_moderate_male() -> None:
    profile = make_profile(
        current_weight=86, height=180, age=27, gender="male", activity_level="moderate"
    )

    assert basal_metabolic_rate(profile) == 1855
    assert total_daily_energy_expenditure(profile) == pytest.approx(2875.25)
    assert calorie_target(profile) == 2375


def test_female_offset_applies_to_non_male() -> None:
    female = make_profile(gender="female")
    other = make_profile(gender="other")

    assert basal_metabolic_rate(female) == 1855 - 166
    assert basal_metabolic_rate(other) == basal_metabolic_rate(female)


@pytest.mark.parametrize(
    ("activity_level", "multiplier"),
    [("sedentary", 1.2), ("light", 1.375), ("active", 1.725), ("unknown", 1.55)],
)
def test_activity_multipliers(activity_level: str, multiplier: float) -> None:
    profile = make_profile(activity_level=activity_level)

    assert total_daily_energy_expenditure(profile) == pytest.approx(1855 * multiplier)


def test_calorie_target_uses_current_weight() -> None:
    heavier = make_profile(current_weight=96)

    assert calorie_target(heavier) == 2530


def test_calorie_target_rounds_half_up() -> None:
    # BMR 1850 with moderate activity gives a TDEE of 2867.5
    profile = make_profile(current_weight=85.5)

    assert calorie_target(profile, deficit=501) == 2367
    assert calorie_target(profile, deficit=500) == 2368
