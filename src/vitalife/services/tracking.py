"""Today's tracker actions for meals, workouts, water and weight."""

from dataclasses import dataclass
from datetime import date

from vitalife.clock import Clock, local_now
from vitalife.domain.models import DailyLog, MealEntry, WorkoutEntry
from vitalife.forms import MealForm, WeightForm, WorkoutForm
from vitalife.services.store import TrackerStore


@dataclass
class TrackingService:
    """Records entries against the current local date."""

    store: TrackerStore
    clock: Clock = local_now

    def today(self) -> date:
        """Return the current local date."""
        return self.clock().date()

    def log_meal(self, form: MealForm) -> MealEntry:
        """Add a meal to today's log."""
        return self.store.add_meal(self.today(), form.to_new_meal())

    def log_workout(self, form: WorkoutForm) -> WorkoutEntry:
        """Add a workout to today's log."""
        return self.store.add_workout(self.today(), form.to_new_workout())

    def drink_water(self, amount_ml: int) -> DailyLog:
        """Adjust today's water intake by the given amount."""
        return self.store.add_water(self.today(), amount_ml)

    def log_weight(self, form: WeightForm) -> DailyLog:
        """Record today's weight and update the profile's current weight."""
        return self.store.log_weight(self.today(), form.weight)
