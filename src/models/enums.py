"""Enumeration types for proposal generation."""

from enum import Enum


class ProposalSource(str, Enum):
    """Where a returned proposal came from."""
    AI = "ai"
    FALLBACK = "fallback"


class ErrorType(str, Enum):
    """Classification of a failed generation attempt."""
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    AUTH_ERROR = "AUTH_ERROR"
    MODEL_NOT_FOUND = "MODEL_NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TIMEOUT = "TIMEOUT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
