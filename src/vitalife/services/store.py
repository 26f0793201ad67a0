"""Profile and daily log state store."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime
from types import MappingProxyType
from typing import Protocol
from uuid import uuid4

from vitalife.domain.models import (
    DailyLog,
    LogPatch,
    MealEntry,
    NewMeal,
    NewWorkout,
    UserProfile,
    WorkoutEntry,
)
from vitalife.services.serialization import (
    dump_logs,
    dump_profile,
    load_logs,
    load_profile,
)

logger = logging.getLogger(__name__)

PROFILE_KEY = "profile"
LOGS_KEY = "logs"


class KeyValueStorage(Protocol):
    """Durable string-valued storage for the store's two keys."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key."""

    def remove_item(self, key: str) -> None:
        """Delete a key if present."""


def new_entry_id() -> str:
    """Return a random unique entry id."""
    return str(uuid4())


@dataclass
class TrackerStore:
    """Holds the user profile and per-day logs, persisting every change."""

    storage: KeyValueStorage
    id_factory: Callable[[], str] = new_entry_id
    _profile: UserProfile | None = field(default=None, init=False, repr=False)
    _logs: dict[str, DailyLog] = field(default_factory=dict, init=False, repr=False)

    @classmethod
    def load(
        cls,
        storage: KeyValueStorage,
        id_factory: Callable[[], str] = new_entry_id,
    ) -> "TrackerStore":
        """Create a store populated from storage, defaulting to empty state."""
        store = cls(storage=storage, id_factory=id_factory)
        store._profile = load_profile(storage.get_item(PROFILE_KEY))
        store._logs = load_logs(storage.get_item(LOGS_KEY))
        logger.debug(
            "Loaded store: profile=%s logs=%d",
            store._profile is not None,
            len(store._logs),
        )
        return store

    @property
    def profile(self) -> UserProfile | None:
        """Return the current profile, or None before onboarding."""
        return self._profile

    @property
    def logs(self) -> Mapping[str, DailyLog]:
        """Return a read-only view of logs keyed by date."""
        return MappingProxyType(self._logs)

    def get_log(self, day: date | str) -> DailyLog:
        """Return the log for a day, or an unsaved empty log.

        Raises ``ValueError`` when ``day`` is not an ISO calendar date.
        """
        return self._log_for(_date_key(day))

    def set_profile(self, profile: UserProfile) -> None:
        """Replace the profile and persist it."""
        self._profile = profile
        self.storage.set_item(PROFILE_KEY, dump_profile(profile))

    def update_log(self, day: date | str, patch: LogPatch) -> DailyLog:
        """Apply field overrides to a day's log, creating it if needed."""
        key = _date_key(day)
        current = self._log_for(key)
        changes = {
            item.name: getattr(patch, item.name)
            for item in fields(patch)
            if getattr(patch, item.name) is not None
        }
        if "water" in changes:
            changes["water"] = max(0, changes["water"])
        updated = replace(current, **changes)
        self._save_log(key, updated)
        return updated

    def add_meal(self, day: date | str, meal: NewMeal) -> MealEntry:
        """Append a meal and add its calories to the day's total."""
        key = _date_key(day)
        current = self._log_for(key)
        entry = MealEntry(
            id=self.id_factory(),
            name=meal.name,
            calories=meal.calories,
            type=meal.type,
        )
        self._save_log(
            key,
            replace(
                current,
                calories=current.calories + entry.calories,
                meals=(*current.meals, entry),
            ),
        )
        return entry

    def add_workout(self, day: date | str, workout: NewWorkout) -> WorkoutEntry:
        """Append a workout and add its duration to the day's exercise."""
        key = _date_key(day)
        current = self._log_for(key)
        entry = WorkoutEntry(
            id=self.id_factory(),
            name=workout.name,
            duration=workout.duration,
            type=workout.type,
        )
        self._save_log(
            key,
            replace(
                current,
                exercise=current.exercise + entry.duration,
                workouts=(*current.workouts, entry),
            ),
        )
        return entry

    def add_water(self, day: date | str, amount_ml: int) -> DailyLog:
        """Add (or with a negative amount, remove) water, never below zero."""
        key = _date_key(day)
        current = self._log_for(key)
        return self.update_log(
            key, LogPatch(water=max(0, current.water + amount_ml))
        )

    def log_weight(self, day: date | str, weight: float) -> DailyLog:
        """Record a day's weight and make it the profile's current weight."""
        updated = self.update_log(day, LogPatch(weight=weight))
        if self._profile is not None:
            self.set_profile(replace(self._profile, current_weight=weight))
        return updated

    def reset(self) -> None:
        """Drop the profile and all logs, in memory and in storage."""
        self._profile = None
        self._logs = {}
        self.storage.remove_item(PROFILE_KEY)
        self.storage.remove_item(LOGS_KEY)
        logger.info("Store reset")

    def _log_for(self, key: str) -> DailyLog:
        return self._logs.get(key) or DailyLog(date=key)

    def _save_log(self, key: str, log: DailyLog) -> None:
        self._logs[key] = replace(log, date=key) if log.date != key else log
        self.storage.set_item(LOGS_KEY, dump_logs(self._logs))


def _date_key(day: date | str) -> str:
    if isinstance(day, datetime):
        return day.date().isoformat()
    if isinstance(day, date):
        return day.isoformat()
    return date.fromisoformat(day).isoformat()
