"""Dependency container wiring for the application."""

from dataclasses import dataclass

from vitalife.adapters.json_file_storage import JsonFileStorage
from vitalife.app_logging import configure_logging
from vitalife.config import Settings
from vitalife.services.dashboard import DashboardService
from vitalife.services.onboarding import OnboardingService
from vitalife.services.store import KeyValueStorage, TrackerStore
from vitalife.services.tracking import TrackingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    store: TrackerStore
    onboarding_service: OnboardingService
    tracking_service: TrackingService
    dashboard_service: DashboardService


def build_container(
    settings: Settings | None = None, storage: KeyValueStorage | None = None
) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    resolved_storage = storage or JsonFileStorage(resolved_settings.storage_path)
    store = TrackerStore.load(resolved_storage)
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        store=store,
        onboarding_service=OnboardingService(store),
        tracking_service=TrackingService(store),
        dashboard_service=DashboardService(
            store=store,
            water_target_ml=resolved_settings.water_target_ml,
            exercise_goal_minutes=resolved_settings.exercise_goal_minutes,
            calorie_deficit=resolved_settings.calorie_deficit,
        ),
    )
