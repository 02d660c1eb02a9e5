# noise_api/core/config.py - Configuration for the noise classifier

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
import logging
import os

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============= API Configuration =============
    PROJECT_NAME: str = "NOI$E"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Noise pollution level classification for uploaded audio recordings"

    # ============= Server Configuration =============
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = False

    # ============= CORS Configuration =============
    ALLOWED_ORIGINS: List[str] = ["*"]
    ALLOWED_METHODS: List[str] = ["*"]
    ALLOWED_HEADERS: List[str] = ["*"]

    # ============= Inference Endpoint =============
    HF_API_TOKEN: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("VITE_HF_API_TOKEN", "HF_API_TOKEN"),
    )
    INFERENCE_ENDPOINT_URL: str = "https://uqkktcn5dm2ucj8d.us-east-1.aws.endpoints.huggingface.cloud"
    INFERENCE_TIMEOUT_SECONDS: float = 60.0

    # ============= Upload Configuration =============
    UPLOAD_SERVER_URL: str = "http://localhost:5000"
    UPLOAD_TIMEOUT_SECONDS: float = 30.0
    MAX_FILE_SIZE: int = 20 * 1024 * 1024
    SUPPORTED_AUDIO_EXTENSIONS: List[str] = [".mp3"]
    SUPPORTED_AUDIO_MIME_TYPES: List[str] = ["audio/mpeg"]

    # ============= Database =============
    DATABASE_URL: Optional[str] = None

    # ============= Logging Configuration =============
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None):
    """Configure root logging once for the CLI and the server."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format=settings.LOG_FORMAT
    )


def validate_configuration(config: Optional[Settings] = None) -> List[str]:
    """Log warnings for settings the app can run without but probably should not."""
    logger = logging.getLogger(__name__)
    config = config or settings

    warnings = []

    if not config.HF_API_TOKEN:
        warnings.append("VITE_HF_API_TOKEN is not set; classification requests will fail")

    if not config.DATABASE_URL:
        warnings.append("DATABASE_URL is not set; database connection will be skipped")

    if config.INFERENCE_TIMEOUT_SECONDS <= 0:
        warnings.append("INFERENCE_TIMEOUT_SECONDS should be positive")

    for warning in warnings:
        logger.warning(f"Configuration warning: {warning}")

    if not warnings:
        logger.info("Configuration validation passed successfully")

    return warnings


def get_settings() -> Settings:
    """Build settings from the environment (and `.env` when present)."""
    env_file = os.getenv("NOISE_ENV_FILE", ".env")
    return Settings(_env_file=env_file)


settings = get_settings()
