"""
AI Routes
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from ..models import AIRequest, AIResponse
from ..services.ai import AIService, get_ai_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ai", tags=["AI"])


@router.post("", response_model=AIResponse)
async def process_ai_request(request: AIRequest, ai: AIService = Depends(get_ai_service)):
    """Run a generate/paraphrase/summarize/elaborate transform on the given text"""
    try:
        content = await ai.transform(request.action, request.content)
    except Exception as e:
        logger.error(f"AI processing error: {type(e).__name__} - {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to process AI request"})

    return AIResponse(content=content)
