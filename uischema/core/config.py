"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .json import JSON_DEPTH_CEILING, MAX_JSON_DEPTH

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="UISCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Serialization
    pretty_json: bool = Field(default=True, description="Pretty-print serialized schemas")
    json_indent: int = Field(default=2, gt=0, le=8, description="Indent width for pretty output")

    # Validation
    check_unique_ids: bool = Field(
        default=False, description="Reject schemas whose component ids repeat"
    )
    max_depth: int = Field(
        default=MAX_JSON_DEPTH,
        gt=0,
        le=JSON_DEPTH_CEILING,
        description="Maximum JSON nesting depth accepted on deserialize",
    )

    # Platform adaptation
    default_platform: str = Field(default="pc-web", description="Adaptation target when none is given")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
