"""
Note Models
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from datetime import datetime

# Range of an SQLite INTEGER
NOTE_ID_MIN = -2**63
NOTE_ID_MAX = 2**63 - 1


class NoteBase(BaseModel):
    """Base note fields"""
    model_config = ConfigDict(extra="forbid")

    title: StrictStr
    content: StrictStr


class NoteCreate(NoteBase):
    """Request for creating a note"""
    pass


class NoteUpdate(NoteBase):
    """Request for updating a note; title and content are replaced wholesale"""
    id: StrictInt = Field(ge=NOTE_ID_MIN, le=NOTE_ID_MAX)


class Note(BaseModel):
    """Note model with all fields"""
    id: int
    title: str
    content: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
