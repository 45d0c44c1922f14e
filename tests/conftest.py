"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

from fitness_coach.errors import UpstreamServiceError
from fitness_coach.models.user_profile import UserProfile


class FakeTextClient:
    """Text client returning canned responses and recording prompts."""

    def __init__(self, response: str | None = None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        name="Jo",
        age="30",
        gender="female",
        height="170",
        weight="65",
        fitness_goal="weight-loss",
        fitness_level="beginner",
        workout_location="home",
        dietary_preference="vegetarian",
    )


@pytest.fixture
def sample_plan_dict():
    """A plan as the model (or the browser) would send it."""
    return {
        "userData": {"name": "Jo", "fitnessGoal": "weight-loss"},
        "workoutPlan": [
            {
                "day": "Monday",
                "exercises": [
                    {"name": "Squats", "sets": "3", "reps": "12", "rest": "60 seconds"},
                    {"name": "Push-ups", "sets": "3", "reps": "10"},
                ],
            },
            {
                "day": "Tuesday",
                "exercises": [{"name": "Walking", "sets": "1", "reps": "30 minutes"}],
            },
        ],
        "dietPlan": [
            {"meal": "Breakfast", "items": ["Oats", "Banana"], "calories": "400"},
            {"meal": "Dinner", "items": ["Lentil soup"]},
        ],
        "tips": ["Drink water", "Sleep well"],
        "motivation": "Keep going",
    }


@pytest.fixture
def plan_json(sample_plan_dict):
    return json.dumps(sample_plan_dict)


@pytest.fixture
def fake_text_client(plan_json):
    """Text client that answers with a valid plan."""
    return FakeTextClient(response=plan_json)


@pytest.fixture
def failing_text_client():
    """Text client whose every call fails like a network error."""
    return FakeTextClient(error=UpstreamServiceError("connection refused"))


@pytest.fixture
def make_text_client():
    """Factory for FakeTextClient instances."""
    return FakeTextClient
