"""Build adapters and generators from settings."""

from .agents.executor import PlanGenerator, QuoteGenerator
from .agents.plan_provider import GeminiTextClient, PlanProvider
from .config import Settings
from .services.images import ImageService
from .services.speech import SpeechService


def create_text_client(settings: Settings) -> GeminiTextClient:
    return GeminiTextClient(api_key=settings.gemini_api_key, model=settings.gemini_model)


def create_plan_generator(settings: Settings, text_client=None) -> PlanGenerator:
    return PlanGenerator(PlanProvider(text_client or create_text_client(settings)))


def create_quote_generator(settings: Settings, text_client=None) -> QuoteGenerator:
    return QuoteGenerator(text_client or create_text_client(settings))


def create_image_service(settings: Settings) -> ImageService:
    return ImageService(
        base_url=settings.image_base_url,
        placeholder_base_url=settings.placeholder_base_url,
        size=settings.image_size,
        model=settings.image_model,
        verify=settings.verify_images,
        timeout=settings.request_timeout,
    )


def create_speech_service(settings: Settings) -> SpeechService:
    return SpeechService(
        api_key=settings.elevenlabs_api_key,
        voice_id=settings.elevenlabs_voice_id,
        model_id=settings.elevenlabs_model_id,
        base_url=settings.elevenlabs_base_url,
        timeout=settings.request_timeout,
    )
