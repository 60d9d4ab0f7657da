from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Mon A.I API"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Embedded store
    DATABASE_URL: str = "sqlite+aiosqlite:///./mon_ai.db"

    # CORS settings
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # External completion API (OpenAI-compatible endpoint, Gemini by default)
    GEMINI_API_KEY: Optional[str] = None
    TRANSLATION_MODEL: str = "gemini-2.5-flash"
    TRANSLATION_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai/"

    # Langfuse
    LANGFUSE_PUBLIC_KEY: Optional[str] = None
    LANGFUSE_SECRET_KEY: Optional[str] = None
    LANGFUSE_HOST: str = "https://cloud.langfuse.com"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @property
    def translator_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY)

    @property
    def tracing_configured(self) -> bool:
        return bool(self.LANGFUSE_PUBLIC_KEY and self.LANGFUSE_SECRET_KEY)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

settings = Settings()
