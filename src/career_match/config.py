"""Configuration management for Career Match."""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SKILL_VOCABULARY = [
    "react", "javascript", "typescript", "python", "java", "c++",
    "node", "express", "mongodb", "sql", "aws", "azure",
    "docker", "kubernetes", "ci/cd", "git", "agile", "scrum",
]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Configuration
    debug: bool = Field(False, description="Enable debug mode")
    log_level: str = Field("INFO", description="Logging level")

    # Recommendation Configuration
    default_limit: int = Field(10, description="Default number of recommendations returned")
    live_feed_cap: int = Field(20, description="Maximum size of a live recommendation feed")

    # Matching Configuration
    skill_vocabulary: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SKILL_VOCABULARY),
        description="Reference vocabulary used to spot skills in job text"
    )
    min_partial_token_length: int = Field(
        1, description="Shortest word that may match by being part of a vocabulary entry"
    )
    salary_parse_mode: str = Field("thousands", description="Salary parsing mode (thousands/auto)")


# Global settings instance
settings = Settings()
