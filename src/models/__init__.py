"""Models package - All Pydantic models organized by domain."""

from src.models.enums import ErrorType, ProposalSource
from src.models.proposal import Proposal, ProposalDraft
from src.models.results import ErrorInfo, GenerationResult

__all__ = [
    # Enums
    "ErrorType",
    "ProposalSource",
    # Proposal models
    "Proposal",
    "ProposalDraft",
    # Result models
    "ErrorInfo",
    "GenerationResult",
]
