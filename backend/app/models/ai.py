"""
AI Transform Models
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict, StrictStr


class AIAction(str, Enum):
    """Transform kinds accepted by the AI proxy"""
    GENERATE = "generate"
    PARAPHRASE = "paraphrase"
    SUMMARIZE = "summarize"
    ELABORATE = "elaborate"

    @property
    def instruction(self) -> str:
        """System prompt sent ahead of the user's text"""
        return AI_INSTRUCTIONS[self]


AI_INSTRUCTIONS = {
    AIAction.GENERATE: "You are a helpful AI writing assistant. Generate content based on the given prompt:",
    AIAction.PARAPHRASE: "Paraphrase the following text while maintaining its meaning:",
    AIAction.SUMMARIZE: "Provide a concise summary of the following text:",
    AIAction.ELABORATE: "Expand and elaborate on the following text with more details and examples:",
}


class AIRequest(BaseModel):
    """Request for an AI transform"""
    model_config = ConfigDict(extra="forbid")

    action: AIAction
    content: StrictStr


class AIResponse(BaseModel):
    content: str
