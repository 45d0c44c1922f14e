"""FastAPI application for the fitness-coach web interface."""

from contextlib import asynccontextmanager
from pathlib import Path

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..agents.executor import PlanGenerator, QuoteGenerator
from ..config import Settings, configure_logging, get_settings
from ..db.repositories import PLAN_STORAGE_KEY
from ..factory import (
    create_image_service,
    create_plan_generator,
    create_quote_generator,
    create_speech_service,
    create_text_client,
)
from ..services.images import ImageService
from ..services.speech import SpeechService
from .routers import images, motivation, plan, speech


# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Share one HTTP connection pool between the media services."""
    image_service: ImageService = app.state.image_service
    speech_service: SpeechService = app.state.speech_service

    async with httpx.AsyncClient(timeout=app.state.settings.request_timeout) as client:
        if image_service.http_client is None:
            image_service.http_client = client
        if speech_service.http_client is None:
            speech_service.http_client = client
        yield
        if image_service.http_client is client:
            image_service.http_client = None
        if speech_service.http_client is client:
            speech_service.http_client = None


def create_app(
    settings: Settings | None = None,
    plan_generator: PlanGenerator | None = None,
    quote_generator: QuoteGenerator | None = None,
    image_service: ImageService | None = None,
    speech_service: SpeechService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Any collaborator not passed in is built from ``settings``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="fitness-coach",
        description="AI-powered workout and diet plan generator",
        version=__version__,
        lifespan=lifespan,
    )

    text_client = None
    if plan_generator is None or quote_generator is None:
        text_client = create_text_client(settings)

    app.state.settings = settings
    app.state.plan_generator = plan_generator or create_plan_generator(settings, text_client)
    app.state.quote_generator = quote_generator or create_quote_generator(settings, text_client)
    app.state.image_service = image_service or create_image_service(settings)
    app.state.speech_service = speech_service or create_speech_service(settings)

    # Mount static files
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    # Include routers
    app.include_router(plan.router)
    app.include_router(images.router)
    app.include_router(speech.router)
    app.include_router(motivation.router)

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        """Single-page UI: form, plan view and media controls."""
        return request.app.state.templates.TemplateResponse(
            request,
            "index.html",
            {"storage_key": PLAN_STORAGE_KEY, "version": __version__},
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
