"""Core module - Configuration and error taxonomy."""

from src.core.config import get_settings, Settings, sanitize_filename
from src.core.exceptions import (
    ProposalServiceError,
    ProposalValidationError,
    QuotaExceededError,
    AuthError,
    ApiError,
    ModelNotFoundError,
    NetworkError,
    GenerationTimeoutError,
    UnexpectedError,
    PDFGenerationError,
)

__all__ = [
    "get_settings",
    "Settings",
    "sanitize_filename",
    "ProposalServiceError",
    "ProposalValidationError",
    "QuotaExceededError",
    "AuthError",
    "ApiError",
    "ModelNotFoundError",
    "NetworkError",
    "GenerationTimeoutError",
    "UnexpectedError",
    "PDFGenerationError",
]
