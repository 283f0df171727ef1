"""
Shared fixtures: a temporary note store and an in-process HTTP client
"""
import pytest
import httpx

from app.database import NoteStore
from app.main import app


@pytest.fixture
def store(tmp_path):
    """Note store backed by a fresh database file"""
    note_store = NoteStore(str(tmp_path / "notes.db"))
    note_store.initialize()
    yield note_store
    note_store.close()


@pytest.fixture
async def client(store):
    """Async HTTP client talking to the app with the temporary store attached"""
    app.state.note_store = store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
    del app.state.note_store
