"""Text-to-speech route."""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from ...errors import SpeechSynthesisError
from ...services.speech import build_narration, parse_narration_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["speech"])


class SpeechPayload(BaseModel):
    type: str | None = None
    data: Any = None


@router.post("/text-to-speech")
async def text_to_speech(request: Request, payload: SpeechPayload):
    """Narrate workout or diet data as MP3 audio."""
    category = payload.type or ""
    data = parse_narration_data(category, payload.data)
    text = build_narration(category, data)
    logger.debug("Narration text: %s", text[:200])

    try:
        audio = await request.app.state.speech_service.synthesize(text)
    except SpeechSynthesisError as e:
        logger.error("Speech synthesis failed: %s", e)
        return JSONResponse({"error": "Failed to generate speech."}, status_code=500)

    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Content-Length": str(len(audio))},
    )
