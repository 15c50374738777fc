"""
Configuration management using Pydantic settings.
"""
from typing import List, Union
import os
from pydantic import validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "StudyBuddy API"
    VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./studybuddy.db")

    # JWT Configuration
    SECRET_KEY: str = os.getenv("SECRET_KEY", "studybuddy-dev-secret-change-me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24 * 7))

    # LLMs Configuration (any OpenAI-compatible chat completions endpoint)
    GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
    LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
    LLM_MODEL: str = os.getenv("LLM_MODEL", "llama-3.1-8b-instant")

    # Quiz generation
    QUIZ_QUESTION_COUNT: int = 5
    QUIZ_OPTION_COUNT: int = 4
    QUIZ_MIN_MATERIAL_CHARS: int = 50
    QUIZ_MAX_MATERIAL_CHARS: int = 4000

    # Summaries
    NOTE_MIN_SUMMARY_CHARS: int = 10
    PDF_MIN_TEXT_CHARS: int = 50
    PDF_MAX_TEXT_CHARS: int = 3000

    # CORS Configuration
    BACKEND_CORS_ORIGINS: Union[List[str], str] = "*"

    @validator("BACKEND_CORS_ORIGINS", pre=True)
    def assemble_cors_origins(cls, v):
        if v == "*" or v == ["*"]:
            return "*"
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v

    # File Upload Configuration
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "./uploads")
    MAX_UPLOAD_SIZE: int = int(os.getenv("MAX_UPLOAD_SIZE", 20 * 1024 * 1024))  # 20MB

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
