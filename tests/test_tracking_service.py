"""Tests for today's tracker actions."""

import pytest
from pydantic import ValidationError

from vitalife.forms import MealForm, WeightForm, WorkoutForm
from vitalife.services.store import TrackerStore
from vitalife.services.tracking import TrackingService
from tests.conftest import fixed_clock, make_profile

TODAY = "2026-10-19"


def test_log_meal_uses_today(store: TrackerStore) -> None:
    service = TrackingService(store, clock=fixed_clock)

    entry = service.log_meal(MealForm(name="Oatmeal", calories=350))

    assert entry.type == "breakfast"
    assert store.logs[TODAY].meals == (entry,)
    assert store.logs[TODAY].calories == 350


def test_log_workout_defaults_to_cardio(store: TrackerStore) -> None:
    service = TrackingService(store, clock=fixed_clock)

    entry = service.log_workout(WorkoutForm(name="Morning Run", duration=30))

    assert entry.type == "cardio"
    assert store.logs[TODAY].exercise == 30


def test_drink_water_increments_and_decrements(store: TrackerStore) -> None:
    service = TrackingService(store, clock=fixed_clock)

    service.drink_water(250)
    service.drink_water(250)
    log = service.drink_water(-1000)

    assert log.water == 0


def test_log_weight_updates_profile(store: TrackerStore) -> None:
    store.set_profile(make_profile())
    service = TrackingService(store, clock=fixed_clock)

    service.log_weight(WeightForm(weight=85.2))

    assert store.logs[TODAY].weight == 85.2
    assert store.profile is not None
    assert store.profile.current_weight == 85.2


def test_forms_reject_missing_values() -> None:
    with pytest.raises(ValidationError):
        MealForm(name="", calories=100)
    with pytest.raises(ValidationError):
        MealForm(name="Cake", calories=-5)
    with pytest.raises(ValidationError):
        WorkoutForm(name="Run", duration=0)
    with pytest.raises(ValidationError):
        WeightForm(weight=0)


def test_meal_form_requires_positive_calories() -> None:
    with pytest.raises(ValidationError):
        MealForm(name="Water", calories=0)

    assert MealForm(name="Apple", calories=95).calories == 95
