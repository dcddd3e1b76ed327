import logging

from pydantic_settings import BaseSettings
from pydantic import HttpUrl, field_validator

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "sk-123"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseSettings):
    ai_api_key: str = ""
    ai_api_url: HttpUrl = "https://api.groq.com/openai/v1/chat/completions"
    ai_model: str = "llama-3.1-8b-instant"
    max_tokens: int = 300
    temperature: float = 0.7
    request_timeout: float = 30.0
    log_level: str = "WARNING"

    class Config:
        env_file = ".env"
        extra = "ignore"
        validate_assignment = True

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @property
    def bearer_token(self) -> str:
        """
        The configured key, or a placeholder when AI_API_KEY is unset or empty.
        The backend decides whether to accept it.
        """
        key = self.ai_api_key.strip()
        if not key:
            logger.debug("AI_API_KEY not set, using placeholder credential")
            return PLACEHOLDER_API_KEY
        return key

settings = Settings()
