"""Narration building and ElevenLabs speech synthesis."""

import logging
from collections.abc import Sequence

import httpx

from ..errors import SpeechCredentialError, SpeechUpstreamError
from ..models.plan import DietMeal, WorkoutDay

logger = logging.getLogger(__name__)

WORKOUT = "workout"
DIET = "diet"

MAX_NARRATED_DAYS = 3
MAX_NARRATED_EXERCISES = 3
MAX_NARRATED_ITEMS = 3

WORKOUT_PREAMBLE = "Here is your personalized workout plan. "
WORKOUT_CLOSING = "Keep pushing towards your goals!"
DIET_PREAMBLE = "Here is your personalized nutrition plan. "
DIET_CLOSING = "Eat healthy and stay hydrated!"

GENERIC_WORKOUT_NARRATION = (
    "Here is your personalized workout plan for the week. "
    "Follow each exercise with proper form and recommended rest periods."
)
GENERIC_DIET_NARRATION = (
    "Here is your personalized nutrition plan. "
    "Make sure to eat balanced meals throughout the day."
)


def narrate_workout(days: Sequence[WorkoutDay]) -> str:
    """Read out the first three days, three exercises each."""
    text = WORKOUT_PREAMBLE
    for day in days[:MAX_NARRATED_DAYS]:
        if not day.day:
            continue
        text += f"{day.day}. "
        for ex in day.exercises[:MAX_NARRATED_EXERCISES]:
            if ex.name:
                text += f"{ex.name}, {ex.sets or '3'} sets of {ex.reps or '10'} reps. "
    return text + WORKOUT_CLOSING


def narrate_diet(meals: Sequence[DietMeal]) -> str:
    """Read out every meal with up to three of its items."""
    text = DIET_PREAMBLE
    for meal in meals:
        if not meal.meal:
            continue
        text += f"For {meal.meal}, have "
        if meal.items:
            text += ", ".join(meal.items[:MAX_NARRATED_ITEMS])
            if len(meal.items) > MAX_NARRATED_ITEMS:
                text += f", and {len(meal.items) - MAX_NARRATED_ITEMS} more items"
        if meal.calories:
            text += f", approximately {meal.calories} calories"
        text += ". "
    return text + DIET_CLOSING


def build_narration(category: str, data: Sequence) -> str:
    """Flatten plan data into the text to be spoken.

    Unknown categories and empty data get a generic sentence; anything other
    than "workout" is treated as the nutrition narration.
    """
    if category == WORKOUT and data:
        return narrate_workout(data)
    if category == DIET and data:
        return narrate_diet(data)

    logger.debug("No %s data to narrate, using generic narration", category)
    return GENERIC_WORKOUT_NARRATION if category == WORKOUT else GENERIC_DIET_NARRATION


def parse_narration_data(category: str, raw) -> list:
    """Convert the JSON ``data`` array of a speech request into plan models.

    Returns an empty list when the payload is not a list or the category is
    unknown; individual malformed entries are skipped.
    """
    if not isinstance(raw, list):
        return []
    if category == WORKOUT:
        model = WorkoutDay
    elif category == DIET:
        model = DietMeal
    else:
        return []

    parsed = []
    for entry in raw:
        try:
            parsed.append(model.from_dict(entry))
        except TypeError:
            logger.debug("Skipping malformed %s entry: %r", category, entry)
    return parsed


class SpeechService:
    """ElevenLabs text-to-speech client."""

    def __init__(
        self,
        api_key: str | None,
        voice_id: str = "21m00Tcm4TlvDq8ikWAM",
        model_id: str = "eleven_monolingual_v1",
        base_url: str = "https://api.elevenlabs.io/v1",
        stability: float = 0.5,
        similarity_boost: float = 0.75,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.api_key = api_key
        self.voice_id = voice_id
        self.model_id = model_id
        self.base_url = base_url.rstrip("/")
        self.stability = stability
        self.similarity_boost = similarity_boost
        self.http_client = http_client
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/text-to-speech/{self.voice_id}"

    async def synthesize(self, text: str) -> bytes:
        """Synthesize speech, returning MP3 bytes.

        Raises:
            SpeechCredentialError: No API key is configured.
            SpeechUpstreamError: Transport failure or non-success response.
        """
        if not self.api_key:
            raise SpeechCredentialError("ElevenLabs")

        headers = {
            "Accept": "audio/mpeg",
            "Content-Type": "application/json",
            "xi-api-key": self.api_key,
        }
        payload = {
            "text": text,
            "model_id": self.model_id,
            "voice_settings": {
                "stability": self.stability,
                "similarity_boost": self.similarity_boost,
            },
        }

        logger.info("Synthesizing %d characters of speech", len(text))
        try:
            if self.http_client is not None:
                response = await self.http_client.post(self.url, headers=headers, json=payload)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, headers=headers, json=payload)
        except httpx.HTTPError as e:
            raise SpeechUpstreamError(f"Speech request failed: {e}") from e

        if not response.is_success:
            logger.error("ElevenLabs error %d: %s", response.status_code, response.text[:500])
            raise SpeechUpstreamError(
                "Failed to generate speech", status_code=response.status_code
            )

        return response.content

    async def narrate(self, category: str, data: Sequence) -> bytes:
        """Build the narration for plan data and synthesize it."""
        return await self.synthesize(build_narration(category, data))
