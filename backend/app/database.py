"""
Database Connection and Note Store
"""
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator, List, Optional
import logging
import threading

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .exceptions import NoteStoreError
from .models import Note

logger = logging.getLogger(__name__)


SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS notes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT,
        content TEXT,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_notes_updated_at ON notes(updated_at)",
)

NOTE_COLUMNS = (
    "id, COALESCE(title, '') AS title, COALESCE(content, '') AS content, created_at, updated_at"
)

# Same layout as SQLite's CURRENT_TIMESTAMP, with microseconds
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class NoteStore:
    """SQLite-backed persistence for notes

    One engine is shared by every caller for the lifetime of the store.
    Schema creation runs once, under a lock, before the first statement.
    """

    def __init__(self, database_path: str, echo: bool = False):
        self.database_path = database_path
        self.engine: Engine = create_engine(
            f"sqlite:///{database_path}",
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        self._initialized = False
        self._init_lock = threading.Lock()
        self._clock_lock = threading.Lock()
        self._last_stamp: Optional[datetime] = None

    def initialize(self) -> None:
        """Create the notes table if it does not exist (idempotent)"""
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)
            with self._transaction("initialize") as conn:
                for statement in SCHEMA_STATEMENTS:
                    conn.execute(text(statement))
            self._initialized = True
            logger.info(f"Note store ready: {self.database_path}")

    def close(self) -> None:
        """Release pooled connections"""
        self.engine.dispose()
        logger.info("Note store closed")

    def check_connection(self) -> bool:
        """Check if the database answers a trivial query"""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database check failed: {e}")
            return False

    def list(self) -> List[Note]:
        """All notes, most recently updated first"""
        self.initialize()
        with self._transaction("list") as conn:
            rows = conn.execute(
                text(f"SELECT {NOTE_COLUMNS} FROM notes ORDER BY updated_at DESC, id DESC")
            ).mappings().all()
        return [Note.model_validate(dict(row)) for row in rows]

    def get_by_id(self, note_id: int) -> Optional[Note]:
        self.initialize()
        with self._transaction("get") as conn:
            return self._fetch(conn, note_id)

    def create(self, title: str, content: str) -> Note:
        """Insert a note and return the row as persisted"""
        self.initialize()
        stamp = self._now()
        with self._transaction("create") as conn:
            result = conn.execute(
                text(
                    "INSERT INTO notes (title, content, created_at, updated_at) "
                    "VALUES (:title, :content, :stamp, :stamp)"
                ),
                {"title": title, "content": content, "stamp": stamp},
            )
            note = self._fetch(conn, result.lastrowid)
        if note is None:
            raise NoteStoreError(f"Note {result.lastrowid} vanished after insert")
        logger.info(f"Created note {note.id}")
        return note

    def update(self, note_id: int, title: str, content: str) -> Optional[Note]:
        """Replace title and content; returns None when the note does not exist"""
        self.initialize()
        stamp = self._now()
        with self._transaction("update") as conn:
            result = conn.execute(
                text(
                    "UPDATE notes SET title = :title, content = :content, updated_at = :stamp "
                    "WHERE id = :id"
                ),
                {"id": note_id, "title": title, "content": content, "stamp": stamp},
            )
            if result.rowcount == 0:
                logger.debug(f"Update skipped, note {note_id} not found")
                return None
            note = self._fetch(conn, note_id)
        logger.info(f"Updated note {note_id}")
        return note

    def delete(self, note_id: int) -> bool:
        """Remove a note; deleting a missing id is not an error"""
        self.initialize()
        with self._transaction("delete") as conn:
            result = conn.execute(text("DELETE FROM notes WHERE id = :id"), {"id": note_id})
        deleted = result.rowcount > 0
        logger.info(f"Deleted note {note_id}" if deleted else f"Delete of missing note {note_id}")
        return deleted

    def _fetch(self, conn: Connection, note_id: int) -> Optional[Note]:
        row = conn.execute(
            text(f"SELECT {NOTE_COLUMNS} FROM notes WHERE id = :id"),
            {"id": note_id},
        ).mappings().first()
        return Note.model_validate(dict(row)) if row is not None else None

    def _now(self) -> str:
        """UTC timestamp, strictly increasing within this process"""
        with self._clock_lock:
            stamp = datetime.now(timezone.utc).replace(tzinfo=None)
            if self._last_stamp is not None and stamp <= self._last_stamp:
                stamp = self._last_stamp + timedelta(microseconds=1)
            self._last_stamp = stamp
        return stamp.strftime(TIMESTAMP_FORMAT)

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Connection]:
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as e:
            logger.error(f"Note store {operation} failed: {e}")
            raise NoteStoreError(f"{operation} failed: {e}") from e


def get_note_store(request: Request) -> NoteStore:
    """Dependency for getting the note store in routes"""
    return request.app.state.note_store
