"""Calorie target calculations."""

import math

from vitalife.domain.models import UserProfile

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["moderate"]
DEFAULT_CALORIE_DEFICIT = 500


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Estimate BMR with the Mifflin-St Jeor equation."""
    offset = 5 if profile.gender == "male" else -161
    return (
        10 * profile.current_weight
        + 6.25 * profile.height
        - 5 * profile.age
        + offset
    )


def total_daily_energy_expenditure(profile: UserProfile) -> float:
    """Scale BMR by the profile's activity multiplier."""
    multiplier = ACTIVITY_MULTIPLIERS.get(
        profile.activity_level, DEFAULT_ACTIVITY_MULTIPLIER
    )
    return basal_metabolic_rate(profile) * multiplier


def calorie_target(
    profile: UserProfile, deficit: int = DEFAULT_CALORIE_DEFICIT
) -> int:
    """Return the daily calorie goal, rounded to the nearest integer."""
    return _round_half_up(total_daily_energy_expenditure(profile) - deficit)


def _round_half_up(value: float) -> int:
    # Python's round() uses banker's rounding.
    return math.floor(value + 0.5)
