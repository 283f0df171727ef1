"""
Application Configuration
Centralized application settings
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # SQLite
    database_path: str = "./notes.db"
    database_echo: bool = False

    # Groq / LLM API (OpenAI-compatible)
    groq_api_key: str = ""
    ai_base_url: str = "https://api.groq.com/openai/v1"
    ai_model: str = "mixtral-8x7b-32768"
    ai_temperature: float = 0.7
    ai_max_tokens: int = 1000
    ai_timeout: float = 60.0

    # Server
    api_prefix: str = "/api"
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    allowed_origins: str = "*"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
