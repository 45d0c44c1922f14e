"""Plan generation and export routes."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, Response

from ...models.plan import FitnessPlan
from ...models.user_profile import UserProfile
from ...services.pdf_export import render_plan_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["plan"])


@router.post("/generate-plan")
async def generate_plan(request: Request, payload: dict[str, Any] = Body(...)):
    """Generate a plan from form data.

    Always answers 200: upstream failures are answered with the static plan.
    """
    profile = UserProfile.from_dict(payload)
    generator = request.app.state.plan_generator

    result = await generator.execute(profile)
    if result.used_fallback:
        logger.info("Served fallback plan for %s", profile.name or "anonymous user")

    return result.plan.to_dict()


@router.post("/export-pdf")
async def export_pdf(payload: dict[str, Any] = Body(...)):
    """Render a plan (as stored by the browser) to a downloadable PDF."""
    try:
        plan = FitnessPlan.from_dict(payload)
    except TypeError as e:
        return JSONResponse({"error": f"Invalid plan: {e}"}, status_code=400)

    content = render_plan_pdf(plan)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{plan.file_name}"'},
    )
