"""
Notes Backend - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import NoteStore
from .exceptions import register_exception_handlers
from .routes import notes_router, ai_router

VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Starting Notes Backend...")

    store = NoteStore(settings.database_path, echo=settings.database_echo)
    store.initialize()
    app.state.note_store = store

    logger.info(f"AI Base URL: {settings.ai_base_url}")
    logger.info(f"Groq API Key configured: {'Yes' if settings.groq_api_key else 'No'}")

    yield

    # Shutdown
    logger.info("Shutting down Notes Backend...")
    store.close()


# Create FastAPI app
app = FastAPI(
    title="Notes API",
    description="Note persistence and AI writing transforms",
    version=VERSION,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=settings.allowed_origins.split(",") if settings.allowed_origins != "*" else ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(notes_router, prefix=settings.api_prefix)
app.include_router(ai_router, prefix=settings.api_prefix)


# Health check endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "Notes API", "version": VERSION}


@app.get("/health")
def health_check(request: Request):
    """Health check endpoint with database status"""
    store = getattr(request.app.state, "note_store", None)
    db_connected = store is not None and store.check_connection()

    return {
        "status": "healthy" if db_connected else "degraded",
        "database": "connected" if db_connected else "disconnected",
        "version": VERSION
    }
