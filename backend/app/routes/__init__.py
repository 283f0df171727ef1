# API Routes
from .notes import router as notes_router
from .ai import router as ai_router

__all__ = [
    "notes_router",
    "ai_router",
]
