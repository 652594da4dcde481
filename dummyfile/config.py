"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_FORMATS = ["docx", "pptx", "xlsx", "pdf", "jpg"]


class Settings(BaseSettings):
    """Generator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DUMMYFILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    environment: Literal["development", "production"] = "development"

    # Logging
    log_level: str = "INFO"

    # Generation
    base_name: str = Field(default="50MB", min_length=1)
    target_size: int = Field(default=50 * 1024 * 1024, ge=0)
    output_dir: str = "."
    formats: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_FORMATS)
    )

    # Size fitting
    on_oversize: Literal["keep-oversized", "truncate"] = "keep-oversized"
    safety_fraction: float = Field(default=0.9, gt=0, lt=1)
    jpeg_quality: int = Field(default=50, ge=1, le=95)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper() if isinstance(v, str) else "INFO"

    @field_validator("target_size", mode="before")
    @classmethod
    def parse_target_size(cls, v: str | int) -> int:
        """Accept human sizes such as "10MiB" in addition to byte counts."""
        if isinstance(v, str):
            from dummyfile.core.sizing import parse_size

            return parse_size(v)
        return v

    @field_validator("formats", mode="before")
    @classmethod
    def parse_formats(cls, v: str | list[str]) -> list[str]:
        """Parse formats from a comma separated string or list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                import json

                v = json.loads(v)
            else:
                v = [name.strip() for name in v.split(",") if name.strip()]

        from dummyfile.core.formats import FileFormat

        # Raises UnsupportedFormatError (a ValueError) for unknown names
        return [FileFormat.from_name(name).value for name in v]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
