"""Motivational quote route."""

from fastapi import APIRouter, Request

router = APIRouter(prefix="/api", tags=["motivation"])


@router.get("/motivation")
async def motivation(request: Request):
    """A short motivational quote; a static one if generation fails."""
    quote = await request.app.state.quote_generator.generate()
    return {"quote": quote}
