"""Presentation-side services: images, speech, audio and PDF export."""

from .audio import AudioSlot, SubprocessPlayback
from .images import ImageResult, ImageService
from .pdf_export import render_plan_pdf
from .speech import SpeechService, build_narration, parse_narration_data

__all__ = [
    "AudioSlot",
    "ImageResult",
    "ImageService",
    "SpeechService",
    "SubprocessPlayback",
    "build_narration",
    "parse_narration_data",
    "render_plan_pdf",
]
