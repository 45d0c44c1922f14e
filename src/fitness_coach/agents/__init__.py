"""Generation agents: prompts, the Gemini adapter and fallbacks."""

from .executor import GenerationResult, PlanGenerator, QuoteGenerator
from .fallback import FALLBACK_QUOTES, fallback_plan, fallback_quote
from .plan_provider import GeminiTextClient, PlanProvider, parse_plan, strip_code_fences
from .prompts import build_image_prompt, build_plan_prompt

__all__ = [
    "FALLBACK_QUOTES",
    "GeminiTextClient",
    "GenerationResult",
    "PlanGenerator",
    "PlanProvider",
    "QuoteGenerator",
    "build_image_prompt",
    "build_plan_prompt",
    "fallback_plan",
    "fallback_quote",
    "parse_plan",
    "strip_code_fences",
]
