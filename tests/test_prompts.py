"""Tests for prompt templates."""

from fitness_coach.agents.prompts import build_image_prompt, build_plan_prompt
from fitness_coach.models import ImageCategory


class TestBuildPlanPrompt:
    """Tests for build_plan_prompt."""

    def test_profile_values_embedded(self, sample_user_profile):
        """Every profile value appears in the prompt."""
        prompt = build_plan_prompt(sample_user_profile)

        assert "Name: Jo" in prompt
        assert "Age: 30" in prompt
        assert "Height: 170cm" in prompt
        assert "Weight: 65kg" in prompt
        assert "Fitness Goal: weight-loss" in prompt
        assert "Dietary Preference: vegetarian" in prompt

    def test_optional_defaults(self, sample_user_profile):
        """Absent medical history and stress level get default wording."""
        prompt = build_plan_prompt(sample_user_profile)

        assert "Medical History: None" in prompt
        assert "Stress Level: Moderate" in prompt

    def test_json_shape_requested(self, sample_user_profile):
        """The prompt asks for the exact JSON shape."""
        prompt = build_plan_prompt(sample_user_profile)

        assert '"workoutPlan": [' in prompt
        assert '"fitnessGoal": "weight-loss"' in prompt
        assert "Respond ONLY with valid JSON" in prompt

    def test_braces_in_values(self, sample_user_profile):
        """Values containing braces are embedded verbatim."""
        sample_user_profile.medical_history = "knee {left}"
        prompt = build_plan_prompt(sample_user_profile)

        assert "Medical History: knee {left}" in prompt


class TestBuildImagePrompt:
    """Tests for build_image_prompt."""

    def test_exercise(self):
        prompt = build_image_prompt("Push-ups", ImageCategory.EXERCISE)
        assert "performing Push-ups exercise" in prompt
        assert "gym" in prompt

    def test_food(self):
        prompt = build_image_prompt("Oatmeal", "food")
        assert "delicious Oatmeal" in prompt
        assert "food photography" in prompt
