"""CLI commands for fitness-coach."""

from .export import export
from .generate import generate
from .image import image
from .init import init
from .narrate import narrate
from .quote import quote
from .regenerate import regenerate
from .serve import serve
from .show import show

__all__ = [
    "export",
    "generate",
    "image",
    "init",
    "narrate",
    "quote",
    "regenerate",
    "serve",
    "show",
]
