"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.enums import LLMProviderType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    PROJECT_NAME: str = "Study Tracker YouTube Notes"
    BACKEND_CORS_ORIGINS: Union[List[str], str] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    # Summarization provider
    SUMMARY_LLM_PROVIDER: LLMProviderType = LLMProviderType.OPENAI

    # OpenAI API
    OPENAI_MODEL_NAME: str = "gpt-4o-mini"
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: Optional[str] = None

    # Groq API
    GROQ_MODEL_NAME: str = "llama-3.3-70b-versatile"
    GROQ_API_KEY: str = ""

    # Gemini API
    GEMINI_MODEL_NAME: str = "gemini-2.5-flash"
    GEMINI_API_KEY: str = ""

    # Database
    DATABASE_URL: str
    
    # DataImpulse Proxy (optional, direct connection when unset)
    DATAIMPULSE_HOST: Optional[str] = None
    DATAIMPULSE_PORT: Optional[int] = None
    DATAIMPULSE_LOGIN: Optional[str] = None
    DATAIMPULSE_PASSWORD: Optional[str] = None

    # Auth
    SECRET_KEY: str
    ACCESS_TOKEN_LIFETIME_SECONDS: int = 3600

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
