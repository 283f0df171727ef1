# Business Logic Services
from .ai import AIService, get_ai_service

__all__ = [
    # AI
    "AIService",
    "get_ai_service",
]
