"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # AWS CONFIG (only needed for quiz generation)
    aws_api_key_id: str | None = Field(
        default=None,
        description="AWS API key ID",
        validation_alias="AWS_ACCESS_KEY_ID",
    )
    aws_api_key_secret: str | None = Field(
        default=None,
        description="AWS API key",
        validation_alias="AWS_SECRET_ACCESS_KEY",
    )
    aws_default_region: str | None = Field(
        default=None,
        description="AWS API region",
        validation_alias="AWS_DEFAULT_REGION",
    )

    # Model Configuration
    model_name: str = Field(
        default="anthropic.claude-3-7-sonnet-20250219-v1:0",
        description="Model to use (AWS Bedrock model ID)",
        validation_alias="MODEL_NAME",
    )

    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for quiz generation",
        validation_alias="GENERATION_TEMPERATURE",
    )

    # Quiz Settings
    default_option_count: int = Field(
        default=4,
        ge=2,
        le=26,
        description="Default number of options per multiple choice question",
        validation_alias="DEFAULT_OPTION_COUNT",
    )

    default_question_count: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Default number of questions to generate",
        validation_alias="DEFAULT_QUESTION_COUNT",
    )

    max_regeneration_attempts: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Extra generation rounds when too few questions parse",
        validation_alias="MAX_REGENERATIONS",
    )

    # Ingestion Settings
    ocr_language: str = Field(
        default="eng",
        description="Tesseract language used for image text recognition",
        validation_alias="OCR_LANGUAGE",
    )

    tesseract_cmd: str | None = Field(
        default=None,
        description="Path to the tesseract binary if it is not on PATH",
        validation_alias="TESSERACT_CMD",
    )

    # Output Settings
    default_output_path: str = Field(
        default="quiz",
        description="Default output file name",
        validation_alias="DEFAULT_OUTPUT",
    )

    output_dir: str = Field(
        default="output",
        description="Directory exported files are written to",
        validation_alias="OUTPUT_DIR",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for the command line tool",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "protected_namespaces": (),
    }


# Loaded once and shared by every command
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
