"""Domain models for dashboard and tracker views."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TodaySummary:
    """Progress for one day against the user's targets."""

    day: date
    calories: int
    calorie_target: int
    calories_percent: float
    calories_remaining: int
    water_ml: int
    water_target_ml: int
    water_percent: float
    water_remaining_ml: int
    exercise_minutes: int
    exercise_goal_minutes: int
    workout_count: int


@dataclass(frozen=True)
class WeightChange:
    """Weight progress since the program started."""

    change_kg: float
    lost: bool
    to_goal_kg: float


@dataclass(frozen=True)
class ChartPoint:
    """A labelled weight value for trend charts."""

    label: str
    weight: float | None


@dataclass(frozen=True)
class WeightChart:
    """Weight history with the goal weight drawn as a reference line."""

    points: list[ChartPoint]
    goal_weight: float | None
