"""Data models for fitness-coach."""

from .plan import (
    DietMeal,
    Exercise,
    FitnessPlan,
    ImageCategory,
    ImageRequest,
    PlanSubject,
    WorkoutDay,
)
from .user_profile import UserProfile, bmi_category, calculate_bmi

__all__ = [
    "DietMeal",
    "Exercise",
    "FitnessPlan",
    "ImageCategory",
    "ImageRequest",
    "PlanSubject",
    "UserProfile",
    "WorkoutDay",
    "bmi_category",
    "calculate_bmi",
]
