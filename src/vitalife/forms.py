"""Pydantic models for user-submitted form input."""

from pydantic import BaseModel, Field

from vitalife.domain.models import ActivityLevel, Gender, MealType, NewMeal, NewWorkout


class OnboardingForm(BaseModel):
    """Onboarding questionnaire answers."""

    name: str = Field(min_length=2)
    age: int = Field(ge=10, le=100)
    gender: Gender
    height: float = Field(ge=100, le=250)
    start_weight: float = Field(ge=30, le=300)
    goal_weight: float = Field(ge=30, le=300)
    goal_duration: int = Field(ge=1, le=24)
    activity_level: ActivityLevel = "moderate"


class MealForm(BaseModel):
    """Meal entry form."""

    name: str = Field(min_length=1)
    calories: int = Field(gt=0)
    type: MealType = "breakfast"

    def to_new_meal(self) -> NewMeal:
        """Convert the form to a store meal request."""
        return NewMeal(name=self.name, calories=self.calories, type=self.type)


class WorkoutForm(BaseModel):
    """Workout entry form."""

    name: str = Field(min_length=1)
    duration: int = Field(ge=1)
    type: str = "cardio"

    def to_new_workout(self) -> NewWorkout:
        """Convert the form to a store workout request."""
        return NewWorkout(name=self.name, duration=self.duration, type=self.type)


class WeightForm(BaseModel):
    """Weight entry form."""

    weight: float = Field(gt=0, le=500)
