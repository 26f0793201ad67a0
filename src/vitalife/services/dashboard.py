"""Read-only summaries for the dashboard and tracker screens."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from vitalife.clock import Clock, local_now
from vitalife.domain.dashboard import (
    ChartPoint,
    TodaySummary,
    WeightChange,
    WeightChart,
)
from vitalife.domain.models import MEAL_TYPES, MealEntry, MealType, UserProfile
from vitalife.domain.targets import DEFAULT_CALORIE_DEFICIT, calorie_target
from vitalife.services.store import TrackerStore

START_LABEL = "Start"
SECONDS_PER_DAY = 24 * 60 * 60


class OnboardingRequiredError(RuntimeError):
    """Raised when a view needs a profile that has not been created yet."""


@dataclass
class DashboardService:
    """Computes the figures the dashboard and tracker screens display."""

    store: TrackerStore
    water_target_ml: int = 2500
    exercise_goal_minutes: int = 30
    calorie_deficit: int = DEFAULT_CALORIE_DEFICIT
    clock: Clock = local_now

    def program_day(self) -> int:
        """Return the day number of the program, starting at 1."""
        profile = self.store.profile
        if profile is None:
            return 0
        started = datetime.fromisoformat(profile.start_date)
        if started.tzinfo is None:
            started = started.replace(tzinfo=UTC)
        elapsed = (self.clock() - started).total_seconds()
        return max(1, int(elapsed // SECONDS_PER_DAY))

    def calorie_target(self) -> int:
        """Return today's calorie goal for the stored profile."""
        return calorie_target(self._require_profile(), self.calorie_deficit)

    def today_summary(self) -> TodaySummary:
        """Return today's calories, water and exercise against targets."""
        target = self.calorie_target()
        today = self.clock().date()
        log = self.store.get_log(today)
        return TodaySummary(
            day=today,
            calories=log.calories,
            calorie_target=target,
            calories_percent=_percent(log.calories, target),
            calories_remaining=max(0, target - log.calories),
            water_ml=log.water,
            water_target_ml=self.water_target_ml,
            water_percent=_percent(log.water, self.water_target_ml),
            water_remaining_ml=max(0, self.water_target_ml - log.water),
            exercise_minutes=log.exercise,
            exercise_goal_minutes=self.exercise_goal_minutes,
            workout_count=len(log.workouts),
        )

    def weight_change(self) -> WeightChange:
        """Return weight lost or gained so far and the distance to goal."""
        profile = self._require_profile()
        change = profile.start_weight - profile.current_weight
        return WeightChange(
            change_kg=round(abs(change), 1),
            lost=change > 0,
            to_goal_kg=round(profile.current_weight - profile.goal_weight, 1),
        )

    def recent_weight_series(self, limit: int = 7) -> list[ChartPoint]:
        """Return weights for the most recent logged days.

        Days without a logged weight fall back to the profile's current
        weight. With no logs at all the series is the start weight alone.
        """
        profile = self.store.profile
        fallback = profile.current_weight if profile else None
        dates = sorted(self.store.logs)[-limit:] if limit > 0 else []
        points = [
            ChartPoint(
                label=chart_label(date.fromisoformat(day)),
                weight=_weight_or(self.store.logs[day].weight, fallback),
            )
            for day in dates
        ]
        if not points and profile is not None:
            points.append(ChartPoint(label=START_LABEL, weight=profile.start_weight))
        return points

    def weight_history(self) -> list[ChartPoint]:
        """Return the start weight followed by every logged weight."""
        points: list[ChartPoint] = []
        profile = self.store.profile
        if profile is not None:
            points.append(ChartPoint(label=START_LABEL, weight=profile.start_weight))
        for day in sorted(self.store.logs):
            weight = self.store.logs[day].weight
            if weight is None:
                continue
            points.append(
                ChartPoint(label=chart_label(date.fromisoformat(day)), weight=weight)
            )
        return points

    def weight_chart(self) -> WeightChart:
        """Return the weight history together with the goal weight."""
        profile = self.store.profile
        return WeightChart(
            points=self.weight_history(),
            goal_weight=profile.goal_weight if profile else None,
        )

    def meals_by_type(
        self, day: date | str | None = None
    ) -> dict[MealType, list[MealEntry]]:
        """Group a day's meals by meal type, keeping insertion order."""
        log = self.store.get_log(day if day is not None else self.clock().date())
        grouped: dict[MealType, list[MealEntry]] = {
            meal_type: [] for meal_type in MEAL_TYPES
        }
        for meal in log.meals:
            grouped.setdefault(meal.type, []).append(meal)
        return grouped

    def _require_profile(self) -> UserProfile:
        profile = self.store.profile
        if profile is None:
            raise OnboardingRequiredError("Complete onboarding first")
        return profile


def chart_label(day: date) -> str:
    """Format a date as a short chart label such as ``Oct 3``."""
    return f"{day:%b} {day.day}"


def _percent(value: float, target: float) -> float:
    if target <= 0:
        return 0.0
    return min(100.0, value / target * 100)


def _weight_or(weight: float | None, fallback: float | None) -> float | None:
    return weight if weight is not None else fallback
