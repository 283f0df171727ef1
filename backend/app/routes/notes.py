"""
Notes Routes
"""
from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional, Union
import logging

from ..models import Note, NoteCreate, NoteUpdate, MessageResponse
from ..models.note import NOTE_ID_MAX, NOTE_ID_MIN
from ..database import NoteStore, get_note_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=Union[Note, List[Note]])
def get_notes(
    note_id: Optional[int] = Query(None, alias="id", ge=NOTE_ID_MIN, le=NOTE_ID_MAX),
    store: NoteStore = Depends(get_note_store),
):
    """List all notes, or fetch one when ?id= is given"""
    if note_id is None:
        return store.list()

    note = store.get_by_id(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note


@router.post("", response_model=Note)
def create_note(note: NoteCreate, store: NoteStore = Depends(get_note_store)):
    """Create a note"""
    return store.create(note.title, note.content)


@router.put("", response_model=Note)
def update_note(note_update: NoteUpdate, store: NoteStore = Depends(get_note_store)):
    """Replace a note's title and content"""
    note = store.update(note_update.id, note_update.title, note_update.content)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note


@router.delete("", response_model=MessageResponse)
def delete_note(
    note_id: Optional[int] = Query(None, alias="id", ge=NOTE_ID_MIN, le=NOTE_ID_MAX),
    store: NoteStore = Depends(get_note_store),
):
    """Delete a note; deleting a missing id still succeeds"""
    if note_id is None:
        raise HTTPException(status_code=400, detail="Note ID is required")

    store.delete(note_id)
    return MessageResponse(message="Note deleted successfully")
