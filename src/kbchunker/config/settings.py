import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load .env file from the project root
# This file: src/kbchunker/config/settings.py
SERVER_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = SERVER_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Project Paths
    ROOT_DIR: Path = Field(default=SERVER_ROOT, description="Project root directory")

    # Knowledge base defaults
    DEFAULT_PRESET: str = Field(default="medium", description="Chunking preset used when none is given")
    CONTENT_PREVIEW_LENGTH: int = Field(default=500, ge=0, description="Characters kept in a document preview")
    DEFAULT_VECTOR_CLASS: str = Field(default="Document", description="Vector store class for new documents")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True
    }


def load_settings() -> Settings:
    """Load settings from environment variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        ROOT_DIR=SERVER_ROOT,
        DEFAULT_PRESET=os.getenv("DEFAULT_PRESET", "medium"),
        CONTENT_PREVIEW_LENGTH=int(os.getenv("CONTENT_PREVIEW_LENGTH", "500")),
        DEFAULT_VECTOR_CLASS=os.getenv("DEFAULT_VECTOR_CLASS", "Document"),
    )


# Global settings instance
settings = load_settings()
