"""Onboarding flow."""

import logging
from dataclasses import dataclass

from vitalife.clock import Clock, local_now
from vitalife.domain.models import UserProfile
from vitalife.forms import OnboardingForm
from vitalife.services.store import TrackerStore

logger = logging.getLogger(__name__)


@dataclass
class OnboardingService:
    """Turns questionnaire answers into the stored profile."""

    store: TrackerStore
    clock: Clock = local_now

    def is_complete(self) -> bool:
        """Return True once a profile exists."""
        return self.store.profile is not None

    def complete(self, form: OnboardingForm) -> UserProfile:
        """Create the profile from a validated form and save it."""
        profile = UserProfile(
            name=form.name,
            age=form.age,
            gender=form.gender,
            height=form.height,
            start_weight=form.start_weight,
            current_weight=form.start_weight,
            goal_weight=form.goal_weight,
            goal_duration=form.goal_duration,
            activity_level=form.activity_level,
            start_date=self.clock().isoformat(),
        )
        self.store.set_profile(profile)
        logger.info("Onboarding completed for %s", profile.name)
        return profile
