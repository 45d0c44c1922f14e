"""Integration tests for the full pipeline.

These tests call the live services and are skipped unless the matching API
keys are configured. Run them with: pytest integration_tests
"""

import pytest

from fitness_coach.agents import PlanGenerator, PlanProvider, QuoteGenerator, fallback_plan
from fitness_coach.config import Settings
from fitness_coach.factory import create_image_service, create_speech_service, create_text_client
from fitness_coach.models import ImageCategory, UserProfile
from fitness_coach.services.pdf_export import render_plan_pdf

settings = Settings.from_env()

requires_gemini = pytest.mark.skipif(
    not settings.gemini_api_key, reason="Gemini API key not configured"
)
requires_elevenlabs = pytest.mark.skipif(
    not settings.elevenlabs_api_key, reason="ElevenLabs API key not configured"
)


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        name="Test User",
        age="28",
        gender="male",
        height="180",
        weight="82",
        fitness_goal="muscle-gain",
        fitness_level="intermediate",
        workout_location="gym",
        dietary_preference="non-vegetarian",
        stress_level="low",
    )


class TestPipelineIntegration:
    """Integration tests for the full generation pipeline."""

    @requires_gemini
    async def test_profile_to_pdf_flow(self, sample_user_profile):
        """Generate a live plan and render it to PDF."""
        generator = PlanGenerator(PlanProvider(create_text_client(settings)))
        result = await generator.execute(sample_user_profile)

        assert not result.used_fallback, result.error
        assert result.plan != fallback_plan()
        assert result.plan.workout_plan
        assert result.plan.diet_plan

        content = render_plan_pdf(result.plan)
        assert content.startswith(b"%PDF")

    @requires_gemini
    async def test_quote(self):
        quote = await QuoteGenerator(create_text_client(settings)).generate()
        assert quote
        assert len(quote.split()) <= 30

    @requires_elevenlabs
    async def test_narration(self):
        audio = await create_speech_service(settings).narrate("diet", [])
        assert len(audio) > 0

    async def test_image_endpoint(self):
        """The image service answers for a generated URL or the placeholder."""
        service = create_image_service(settings)
        service.verify = True
        result = await service.generate("Push-ups", ImageCategory.EXERCISE)

        assert result.image_url.startswith("https://")
