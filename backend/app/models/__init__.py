# Pydantic Models
from .note import Note, NoteBase, NoteCreate, NoteUpdate, MessageResponse
from .ai import AIAction, AIRequest, AIResponse

__all__ = [
    # Note
    "Note", "NoteBase", "NoteCreate", "NoteUpdate", "MessageResponse",
    # AI
    "AIAction", "AIRequest", "AIResponse",
]
