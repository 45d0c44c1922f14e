"""Illustrative image generation for exercises and foods."""

import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from ..agents.prompts import build_image_prompt
from ..models.plan import ImageCategory, ImageRequest

logger = logging.getLogger(__name__)

PLACEHOLDER_COLORS = {
    ImageCategory.EXERCISE: "6366f1",
    ImageCategory.FOOD: "10b981",
}

GENERATED_SERVICE = "Pollinations AI (Flux)"
PLACEHOLDER_SERVICE = "Placeholder"


def escape(text: str) -> str:
    """Percent-encode text the way encodeURIComponent does."""
    return quote(text, safe="-_.!~*'()")


@dataclass
class ImageResult:
    """Where to fetch the image and which path produced it."""

    image_url: str
    service: str
    success: bool
    error: str | None = None

    def to_dict(self) -> dict:
        data = {
            "imageUrl": self.image_url,
            "service": self.service,
            "success": self.success,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


class ImageService:
    """Builds generation URLs and falls back to a coloured placeholder.

    With ``verify=True`` the generation URL is requested once and any
    transport error or non-success status selects the placeholder.
    """

    def __init__(
        self,
        base_url: str = "https://image.pollinations.ai/prompt",
        placeholder_base_url: str = "https://via.placeholder.com",
        size: int = 1024,
        model: str = "flux",
        verify: bool = False,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.placeholder_base_url = placeholder_base_url.rstrip("/")
        self.size = size
        self.model = model
        self.verify = verify
        self.http_client = http_client
        self.timeout = timeout

    def build_url(self, request: ImageRequest) -> str:
        """Generation URL for an enhanced prompt."""
        prompt = build_image_prompt(request.prompt, request.category)
        logger.debug("Enhanced image prompt: %s", prompt)
        return (
            f"{self.base_url}/{escape(prompt)}"
            f"?width={self.size}&height={self.size}"
            f"&nologo=true&enhance=true&model={self.model}"
        )

    def placeholder_url(self, name: str, category: ImageCategory | str) -> str:
        """Deterministic placeholder: category colour, item name as text."""
        color = PLACEHOLDER_COLORS[ImageCategory.coerce(category)]
        return f"{self.placeholder_base_url}/{self.size}/{color}/ffffff?text={escape(name or 'Image')}"

    async def generate(self, name: str, category: ImageCategory | str) -> ImageResult:
        """Get an image reference for an item. Never raises."""
        category = ImageCategory.coerce(category)
        request = ImageRequest(prompt=name, category=category)
        logger.info("Image request: %s (%s)", name, category.value)

        try:
            url = self.build_url(request)
            if self.verify:
                await self._check(url)
        except Exception as e:
            # Any failure degrades to the placeholder image
            logger.warning("Image generation failed for %r: %s", name, e)
            return ImageResult(
                image_url=self.placeholder_url(name, category),
                service=PLACEHOLDER_SERVICE,
                success=False,
                error=str(e) or type(e).__name__,
            )

        return ImageResult(image_url=url, service=GENERATED_SERVICE, success=True)

    async def _check(self, url: str) -> None:
        if self.http_client is not None:
            await self._probe(self.http_client, url)
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            await self._probe(client, url)

    @staticmethod
    async def _probe(client: httpx.AsyncClient, url: str) -> None:
        async with client.stream("GET", url) as response:
            response.raise_for_status()
