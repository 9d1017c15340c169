"""Configuration management for Proposal Studio."""

import re
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


# Value shipped in .env.example; treated the same as a missing key
PLACEHOLDER_API_KEY = "your_google_ai_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # Google Generative AI Configuration
    # ===========================================
    GOOGLE_API_KEY: str = Field(default="", description="Google AI Studio API key")
    GEMINI_API_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative Language API base URL"
    )
    AI_MODELS: List[str] = Field(
        default=["gemini-pro", "gemini-1.0-pro", "gemini-1.5-flash-latest"],
        description="Candidate models, tried in order"
    )
    AI_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Overall time budget for trying all candidate models"
    )

    # ===========================================
    # Generation Parameters
    # ===========================================
    AI_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature")
    AI_MAX_OUTPUT_TOKENS: int = Field(default=1500, description="Response token limit")
    AI_TOP_P: float = Field(default=0.8, description="Nucleus sampling")
    AI_TOP_K: int = Field(default=40, description="Top-k sampling")

    # ===========================================
    # Request Limits
    # ===========================================
    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Deadline for a single /generate or /generate-pdf request"
    )
    MAX_IDEA_LENGTH: int = Field(
        default=2000,
        description="Longest idea accepted by the HTTP layer"
    )
    MAX_PROPOSAL_IDEA_LENGTH: int = Field(
        default=4000,
        description="Longest idea the proposal service forwards to the AI"
    )
    FALLBACK_TITLE_LENGTH: int = Field(
        default=50,
        description="Idea prefix length used in fallback titles"
    )

    # ===========================================
    # Server Configuration
    # ===========================================
    CORS_ORIGINS: List[str] = Field(default=["*"], description="Allowed CORS origins")
    DEBUG: bool = Field(default=False, description="Debug mode")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def ai_configured(self) -> bool:
        """True when a usable Google API key is present."""
        key = self.GOOGLE_API_KEY.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


def sanitize_filename(title: str) -> str:
    """
    Build a download-safe file stem from a proposal title.

    Every character outside ASCII letters and digits becomes an underscore,
    so "A/B: Test!" turns into "A_B__Test_".

    Args:
        title: Proposal title

    Returns:
        Sanitized file stem (without extension)
    """
    return re.sub(r"[^A-Za-z0-9]", "_", title or "") or "proposal"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
