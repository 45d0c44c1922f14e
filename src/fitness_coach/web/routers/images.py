"""Image generation route."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...models.plan import ImageCategory

router = APIRouter(prefix="/api", tags=["images"])


class ImagePayload(BaseModel):
    prompt: str | None = None
    type: str | None = None


@router.post("/generate-image")
async def generate_image(request: Request, payload: ImagePayload):
    """Image URL for an exercise or food item; placeholder on failure."""
    if not payload.prompt or not payload.type:
        return JSONResponse({"error": "Missing prompt or type"}, status_code=400)

    category = ImageCategory.coerce(payload.type)
    result = await request.app.state.image_service.generate(payload.prompt, category)
    return result.to_dict()
