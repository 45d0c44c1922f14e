"""Fitness plan data models."""

import re
from dataclasses import dataclass, field
from enum import Enum


class ImageCategory(str, Enum):
    """What an illustrative image depicts."""

    EXERCISE = "exercise"
    FOOD = "food"

    @classmethod
    def coerce(cls, value) -> "ImageCategory":
        """Anything that is not an exercise is treated as food."""
        return cls.EXERCISE if value == cls.EXERCISE.value else cls.FOOD


def _text(value, default: str = "") -> str:
    """Coerce a scalar JSON value to str; reject nested structures."""
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        raise TypeError(f"Expected a scalar value, got {type(value).__name__}")
    return str(value)


def _optional_text(value) -> str | None:
    if value is None:
        return None
    return _text(value)


def _object(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _array(value, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{what} must be an array, got {type(value).__name__}")
    return value


@dataclass
class Exercise:
    """A single exercise prescription."""

    name: str
    sets: str = ""
    reps: str = ""
    rest: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {"name": self.name, "sets": self.sets, "reps": self.reps}
        if self.rest is not None:
            data["rest"] = self.rest
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        data = _object(data, "exercise")
        return cls(
            name=_text(data.get("name")),
            sets=_text(data.get("sets")),
            reps=_text(data.get("reps")),
            rest=_optional_text(data.get("rest")),
        )


@dataclass
class WorkoutDay:
    """One day of the weekly workout plan."""

    day: str
    exercises: list[Exercise] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day": self.day,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutDay":
        """Create from dictionary."""
        data = _object(data, "workout day")
        return cls(
            day=_text(data.get("day")),
            exercises=[
                Exercise.from_dict(ex)
                for ex in _array(data.get("exercises"), "exercises")
            ],
        )


@dataclass
class DietMeal:
    """One meal of the daily diet plan."""

    meal: str
    items: list[str] = field(default_factory=list)
    calories: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {"meal": self.meal, "items": list(self.items)}
        if self.calories is not None:
            data["calories"] = self.calories
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DietMeal":
        """Create from dictionary."""
        data = _object(data, "meal")
        return cls(
            meal=_text(data.get("meal")),
            items=[_text(item) for item in _array(data.get("items"), "items")],
            calories=_optional_text(data.get("calories")),
        )


@dataclass
class PlanSubject:
    """Who the plan is for."""

    name: str
    fitness_goal: str

    def to_dict(self) -> dict:
        return {"name": self.name, "fitnessGoal": self.fitness_goal}

    @classmethod
    def from_dict(cls, data: dict) -> "PlanSubject":
        data = _object(data, "userData")
        return cls(
            name=_text(data.get("name")),
            fitness_goal=_text(data.get("fitnessGoal")),
        )


@dataclass
class FitnessPlan:
    """A complete workout + diet + tips + motivation bundle.

    The dictionary form uses the camelCase keys the browser stores under
    ``localStorage["fitnessPlan"]``.
    """

    user_data: PlanSubject
    workout_plan: list[WorkoutDay]
    diet_plan: list[DietMeal]
    tips: list[str] = field(default_factory=list)
    motivation: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and transport."""
        return {
            "userData": self.user_data.to_dict(),
            "workoutPlan": [day.to_dict() for day in self.workout_plan],
            "dietPlan": [meal.to_dict() for meal in self.diet_plan],
            "tips": list(self.tips),
            "motivation": self.motivation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FitnessPlan":
        """Create from dictionary.

        Missing sections become empty; values of the wrong JSON type raise
        TypeError so that callers never see a half-built plan.
        """
        data = _object(data, "plan")
        return cls(
            user_data=PlanSubject.from_dict(data.get("userData") or {}),
            workout_plan=[
                WorkoutDay.from_dict(day)
                for day in _array(data.get("workoutPlan"), "workoutPlan")
            ],
            diet_plan=[
                DietMeal.from_dict(meal)
                for meal in _array(data.get("dietPlan"), "dietPlan")
            ],
            tips=[_text(tip) for tip in _array(data.get("tips"), "tips")],
            motivation=_text(data.get("motivation")),
        )

    @property
    def file_name(self) -> str:
        """Download name for the PDF export."""
        return re.sub(r"\s+", "_", self.user_data.name) + "_Fitness_Plan.pdf"

    def get_summary(self) -> str:
        """Generate a plain-text rendering of the plan."""
        summary = f"Plan for: {self.user_data.name}\n"
        summary += f"Goal: {self.user_data.fitness_goal}\n\n"

        summary += "Workout Plan:\n"
        for day in self.workout_plan:
            summary += f"  {day.day}:\n"
            for ex in day.exercises:
                line = f"    - {ex.name}: {ex.sets} sets x {ex.reps} reps"
                if ex.rest:
                    line += f" (rest {ex.rest})"
                summary += line + "\n"

        summary += "\nDiet Plan:\n"
        for meal in self.diet_plan:
            label = meal.meal
            if meal.calories:
                label += f" (~{meal.calories} kcal)"
            summary += f"  {label}: {', '.join(meal.items)}\n"

        if self.tips:
            summary += "\nTips:\n"
            for i, tip in enumerate(self.tips, start=1):
                summary += f"  {i}. {tip}\n"

        if self.motivation:
            summary += f'\n"{self.motivation}"\n'

        return summary


@dataclass
class ImageRequest:
    """Transient request for an illustrative image."""

    prompt: str
    category: ImageCategory
