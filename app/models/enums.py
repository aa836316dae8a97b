"""
Enums for type-safe values across the application.
"""
from enum import Enum


class LLMRole(str, Enum):
    """Role for LLM provider messages (OpenAI/Gemini/Groq compatible)."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMProviderType(str, Enum):
    """Supported LLM provider types for configuration."""
    OPENAI = "openai"
    GROQ = "groq"
    GEMINI = "gemini"
