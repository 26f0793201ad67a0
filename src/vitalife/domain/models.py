"""Domain models for the health tracker."""

from dataclasses import dataclass
from typing import Literal

Gender = Literal["male", "female", "other"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[MealType, ...] = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class UserProfile:
    """Body metrics and goals captured during onboarding."""

    name: str
    age: int
    gender: Gender
    height: float
    start_weight: float
    current_weight: float
    goal_weight: float
    goal_duration: int
    activity_level: ActivityLevel
    start_date: str


@dataclass(frozen=True)
class NewMeal:
    """Meal details supplied by the caller before an id is assigned."""

    name: str
    calories: int
    type: MealType


@dataclass(frozen=True)
class NewWorkout:
    """Workout details supplied by the caller before an id is assigned."""

    name: str
    duration: int
    type: str


@dataclass(frozen=True)
class MealEntry:
    """A meal stored in a daily log."""

    id: str
    name: str
    calories: int
    type: MealType


@dataclass(frozen=True)
class WorkoutEntry:
    """A workout stored in a daily log."""

    id: str
    name: str
    duration: int
    type: str


@dataclass(frozen=True)
class DailyLog:
    """Aggregate record of a single calendar day."""

    date: str
    water: int = 0
    calories: int = 0
    exercise: int = 0
    meals: tuple[MealEntry, ...] = ()
    workouts: tuple[WorkoutEntry, ...] = ()
    weight: float | None = None


@dataclass(frozen=True)
class LogPatch:
    """Field overrides for a daily log; ``None`` leaves a field unchanged."""

    weight: float | None = None
    water: int | None = None
