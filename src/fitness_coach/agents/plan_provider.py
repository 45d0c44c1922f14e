"""Gemini-backed text generation and plan parsing."""

import json
import logging
import re
from typing import Protocol

import httpx
from google import genai
from google.genai import errors as genai_errors

from ..errors import (
    MissingCredentialError,
    PlanCredentialError,
    PlanParseError,
    PlanUpstreamError,
    ResponseShapeError,
    UpstreamServiceError,
)
from ..models.plan import FitnessPlan

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\n?")
_FENCE = re.compile(r"```\n?")


class TextClient(Protocol):
    """Anything that turns a prompt into model text."""

    async def generate(self, prompt: str) -> str: ...


class GeminiTextClient:
    """Thin async wrapper around the google-genai SDK.

    Raises MissingCredentialError when no key is configured (the service is
    never contacted), UpstreamServiceError for API and transport failures,
    and ResponseShapeError when the response carries no text.
    """

    def __init__(self, api_key: str | None, model: str = "gemini-2.5-flash", client=None):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise MissingCredentialError("Gemini")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self.client
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except genai_errors.APIError as e:
            raise UpstreamServiceError(f"Gemini API error: {e}", status_code=e.code) from e
        except httpx.HTTPError as e:
            raise UpstreamServiceError(f"Gemini request failed: {e}") from e
        except Exception as e:
            # SDK response errors and aiohttp or socket failures
            raise UpstreamServiceError(f"Gemini call failed: {type(e).__name__}: {e}") from e

        try:
            text = response.text
        except ValueError as e:
            raise ResponseShapeError(f"Gemini response has no readable text: {e}") from e
        if not text:
            raise ResponseShapeError("Gemini returned an empty response")
        return text


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers the model may wrap JSON in."""
    text = _JSON_FENCE.sub("", text)
    text = _FENCE.sub("", text)
    return text.strip()


def parse_plan(text: str) -> FitnessPlan:
    """Parse model output into a FitnessPlan.

    Raises:
        PlanParseError: If the text is not JSON or its values have the wrong types.
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except (json.JSONDecodeError, RecursionError) as e:
        raise PlanParseError(f"Plan response is not valid JSON: {e}") from e

    try:
        return FitnessPlan.from_dict(data)
    except (TypeError, RecursionError) as e:
        raise PlanParseError(f"Plan response has an unexpected structure: {e}") from e


class PlanProvider:
    """Adapter between the plan prompt and the text-generation service."""

    def __init__(self, text_client: TextClient):
        self.text_client = text_client

    async def generate(self, prompt: str) -> FitnessPlan:
        """Make exactly one generation call and parse the result.

        Raises:
            PlanCredentialError: No API key is configured.
            PlanUpstreamError: The call failed or returned no text.
            PlanParseError: The text could not be parsed into a plan.
        """
        try:
            text = await self.text_client.generate(prompt)
        except MissingCredentialError as e:
            raise PlanCredentialError(e.service) from e
        except (UpstreamServiceError, ResponseShapeError) as e:
            raise PlanUpstreamError(str(e)) from e

        logger.debug("Plan response received (%d chars)", len(text))
        return parse_plan(text)
